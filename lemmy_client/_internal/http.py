"""Route, header and HTTP client helpers shared by the backends."""

from collections.abc import Mapping
from typing import Any

import httpx

from lemmy_client._version import __version__
from lemmy_client.options import ClientOptions

API_PATH = "/api/v3/"
USER_AGENT = f"Lemmy-Client-py/{__version__}"
DEFAULT_TIMEOUT: float | None = None


def build_route(path: str, options: ClientOptions) -> str:
    """Build the absolute URL of an endpoint.

    ``path`` is used as given, without any encoding.
    """
    scheme = "https" if options.secure else "http"
    return f"{scheme}://{options.domain}{API_PATH}{path}"


def build_url(path: str, options: ClientOptions, query: Mapping[str, Any] | None = None) -> str:
    """Build the endpoint URL with ``query`` appended as a query string."""
    route = build_route(path, options)
    if not query:
        return route
    return f"{route}?{httpx.QueryParams(query)}"


def merge_headers(
    headers: Mapping[str, str],
    jwt: str | None,
    *,
    user_agent: str | None = USER_AGENT,
) -> dict[str, str]:
    """Combine caller headers with the default user agent and bearer auth.

    Args:
        headers: Headers supplied by the caller. Always sent as given.
        jwt: Bearer token. When None, no Authorization header is added.
        user_agent: Default user agent, only added when the caller did not
            supply one under any letter casing. None disables it.

    Returns:
        A new dict of headers.
    """
    merged = dict(headers)
    present = {name.lower() for name in merged}

    if user_agent is not None and "user-agent" not in present:
        merged["user-agent"] = user_agent
    if jwt is not None and "authorization" not in present:
        merged["Authorization"] = f"Bearer {jwt}"

    return merged


def create_http_client(
    *,
    timeout: float | None = DEFAULT_TIMEOUT,
) -> httpx.AsyncClient:
    """Create the pooled HTTP client used by the native backend.

    Args:
        timeout: Request timeout in seconds. None (the default) disables it;
            callers that need bounded latency wrap calls themselves.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(timeout=timeout)
