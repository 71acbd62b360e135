"""Transport backends.

Exactly one backend is active per client. ``default_backend`` picks the
browser backend under Pyodide and the httpx backend everywhere else.
"""

import sys

from lemmy_client._internal.backends.base import LemmyBackend, Method
from lemmy_client._internal.backends.fetch import FetchBackend
from lemmy_client._internal.backends.native import HttpxBackend
from lemmy_client.options import ClientOptions


def default_backend(options: ClientOptions, *, debug: bool = False) -> LemmyBackend:
    """Build the backend for the current platform."""
    if sys.platform == "emscripten":
        return FetchBackend(options, debug=debug)
    return HttpxBackend(options, debug=debug)


__all__ = [
    "FetchBackend",
    "HttpxBackend",
    "LemmyBackend",
    "Method",
    "default_backend",
]
