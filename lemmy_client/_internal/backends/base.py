"""Request path shared by every transport backend."""

import sys
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Literal, TypeVar

from pydantic import BaseModel

from lemmy_client._internal.http import USER_AGENT, build_route, build_url, merge_headers
from lemmy_client._internal.registry import is_response_type
from lemmy_client.exceptions import LemmyConfigError, LemmyOtherError
from lemmy_client.options import ClientOptions
from lemmy_client.request import LemmyRequest
from lemmy_client.response import Err, LemmyResult, decode_response

R = TypeVar("R")

Method = Literal["GET", "POST", "PUT"]


class LemmyBackend(ABC):
    """Base class for transport backends.

    ``make_request`` builds the URL, encodes the form, attaches headers and
    decodes the response. Subclasses only implement ``_send``, which
    performs a single round trip and raises ``LemmyOtherError`` when the
    transport fails.
    """

    #: Default user agent header. None leaves the header to the platform.
    user_agent: str | None = USER_AGENT

    def __init__(self, options: ClientOptions, *, debug: bool = False) -> None:
        self.options = options
        self._debug = debug
        self._bound = False

    def bind(self, options: ClientOptions) -> None:
        """Attach the backend to the options of the client that owns it.

        A backend serves a single set of options. Binding it again to the
        same options is allowed.

        Raises:
            LemmyConfigError: If a client already bound the backend to other
                options.
        """
        if self._bound and self.options is not options:
            raise LemmyConfigError("Backend is already bound to another client's options")
        self.options = options
        self._bound = True

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[lemmy-client] {message}", file=sys.stderr)

    async def make_request(
        self,
        method: Method,
        path: str,
        request: LemmyRequest[Any],
        headers: Mapping[str, str],
        response_type: type[R] | Any,
    ) -> LemmyResult[R]:
        """Send one request and decode the response.

        Args:
            method: GET, POST or PUT. Anything else is a programming error.
            path: Endpoint path relative to ``/api/v3/``.
            request: Form and optional per-call token.
            headers: Extra headers sent with the request.
            response_type: Registered type of a successful response.

        Returns:
            ``Ok`` with the decoded response, or ``Err``.
        """
        if not is_response_type(response_type):
            raise TypeError(f"{response_type!r} is not a registered response type")

        form = _dump_form(request.body)

        match method:
            case "GET":
                url = build_url(path, self.options, form)
                json_body = None
            case "POST" | "PUT":
                url = build_route(path, self.options)
                json_body = form
            case _:
                raise AssertionError(f"Only GET, POST and PUT are used. Got {method!r}")

        jwt = request.jwt if request.jwt is not None else self.options.jwt
        request_headers = merge_headers(headers, jwt, user_agent=self.user_agent)

        self._log_debug(f"{method} {url}")
        try:
            status_code, content = await self._send(method, url, request_headers, json_body)
        except LemmyOtherError as e:
            self._log_debug(f"Request failed: {e}")
            return Err(e)

        result = decode_response(content, response_type, status_code=status_code)
        if isinstance(result, Err):
            self._log_debug(f"{method} {path} returned {status_code}: {result.error}")
        else:
            self._log_debug(f"{method} {path} returned {status_code}")
        return result

    @abstractmethod
    async def _send(
        self,
        method: Method,
        url: str,
        headers: dict[str, str],
        json_body: dict[str, Any] | None,
    ) -> tuple[int, str | bytes]:
        """Perform the round trip and return the status code and body."""

    async def aclose(self) -> None:
        """Release transport resources. Nothing to release by default."""


def _dump_form(form: BaseModel | None) -> dict[str, Any] | None:
    if form is None:
        return None
    if not isinstance(form, BaseModel):
        raise TypeError(f"Forms must be pydantic models, got {type(form).__name__}")
    return form.model_dump(mode="json", exclude_none=True)
