"""Lemmy client for Python.

Typed async client for the Lemmy v3 HTTP API.

Public API:
    LemmyClient - One async method per API endpoint
    ClientOptions - Instance domain, scheme and default token
    LemmyRequest - Form plus optional per-call token
    Ok, Err, LemmyResult - Result of every call
    LemmyApiError, LemmyOtherError - Errors carried by Err

Request and response models live in ``lemmy_client.models``.
"""

from lemmy_client._version import __version__
from lemmy_client.client import LemmyClient
from lemmy_client.exceptions import (
    LemmyApiError,
    LemmyClientError,
    LemmyConfigError,
    LemmyOtherError,
)
from lemmy_client.models.errors import ErrorKind
from lemmy_client.options import ClientOptions
from lemmy_client.request import LemmyRequest
from lemmy_client.response import Err, LemmyResult, Ok

__all__ = [
    "__version__",
    "ClientOptions",
    "Err",
    "ErrorKind",
    "LemmyApiError",
    "LemmyClient",
    "LemmyClientError",
    "LemmyConfigError",
    "LemmyOtherError",
    "LemmyRequest",
    "LemmyResult",
    "Ok",
]
