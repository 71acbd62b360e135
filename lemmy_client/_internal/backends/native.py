"""Native transport backend built on httpx."""

from typing import Any

import httpx

from lemmy_client._internal.backends.base import LemmyBackend, Method
from lemmy_client._internal.http import DEFAULT_TIMEOUT, create_http_client
from lemmy_client.exceptions import LemmyOtherError
from lemmy_client.options import ClientOptions


class HttpxBackend(LemmyBackend):
    """Backend sending requests through a pooled ``httpx.AsyncClient``.

    There is no built-in cancellation or timeout. Wrap calls in
    ``asyncio.timeout`` (or pass ``timeout``) to bound latency.

    A client passed in is borrowed and left open by ``aclose``; a client
    created here is owned and closed by it.
    """

    def __init__(
        self,
        options: ClientOptions,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = DEFAULT_TIMEOUT,
        debug: bool = False,
    ) -> None:
        super().__init__(options, debug=debug)
        self._owns_client = client is None
        self._client = client if client is not None else create_http_client(timeout=timeout)

    async def _send(
        self,
        method: Method,
        url: str,
        headers: dict[str, str],
        json_body: dict[str, Any] | None,
    ) -> tuple[int, bytes]:
        try:
            response = await self._client.request(method, url, headers=headers, json=json_body)
        except httpx.TimeoutException as e:
            raise LemmyOtherError("Request timed out", cause=e) from e
        except UnicodeEncodeError as e:
            # httpx encodes header values as ASCII while building the request.
            raise LemmyOtherError("Invalid header value", cause=e) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise LemmyOtherError("Request failed", cause=e) from e
        return response.status_code, response.content

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxBackend":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
