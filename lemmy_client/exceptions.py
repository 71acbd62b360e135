"""Public exceptions for the Lemmy client.

Errors produced while talking to a Lemmy instance are returned inside an
``Err`` result rather than raised. They are exceptions so that ``unwrap()``
can raise them and so that causes chain the usual way.
"""

from typing import Any

from lemmy_client.models.errors import ErrorKind


class LemmyClientError(Exception):
    """Base exception for all Lemmy client errors."""


class LemmyApiError(LemmyClientError):
    """Error type returned by the Lemmy instance.

    Args:
        error: The wire error code, e.g. ``"incorrect_login"``.
        message: Optional payload the server attached to the error.
        status_code: HTTP status of the response, when known.
    """

    def __init__(
        self,
        error: str,
        message: Any = None,
        *,
        status_code: int | None = None,
    ) -> None:
        super().__init__(f"Lemmy Error: {error}")
        self.error = error
        self.message = message
        self.status_code = status_code

    @property
    def kind(self) -> ErrorKind | None:
        """The known error kind, or None for codes newer than this client."""
        try:
            return ErrorKind(self.error)
        except ValueError:
            return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LemmyApiError):
            return NotImplemented
        return (self.error, self.message) == (other.error, other.message)

    def __hash__(self) -> int:
        return hash(self.error)


class LemmyOtherError(LemmyClientError):
    """Sending the request or parsing the response failed.

    Parse failures are most likely due to version differences between the
    instance and this client.
    """

    def __init__(
        self,
        message: str,
        *,
        cause: BaseException | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(f"{message}: {cause}" if cause is not None else message)
        self.cause = cause
        self.status_code = status_code
        self.__cause__ = cause

    @property
    def causes(self) -> list[str]:
        """Messages along the cause chain, outermost first."""
        chain: list[str] = []
        current: BaseException | None = self
        while current is not None:
            chain.append(str(current))
            current = current.__cause__
        return chain


class LemmyConfigError(LemmyClientError):
    """Configuration error (missing env vars, invalid config)."""
