"""Result envelope returned by every client call.

A call never raises for a failed request. It returns ``Ok(value)`` with the
decoded response or ``Err(error)`` carrying a ``LemmyApiError`` (the
instance rejected the request) or a ``LemmyOtherError`` (sending or
decoding failed).

Lemmy does not tag its responses, so the body is decoded by trying shapes
in a fixed order:

1. The body must be JSON.
2. An object made only of a string ``error`` and an optional ``message``
   is a structured API error.
3. Anything else is validated against the expected response type.
4. A body matching neither becomes a ``LemmyOtherError``.
"""

import json
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Generic, NoReturn, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from lemmy_client.exceptions import LemmyApiError, LemmyOtherError
from lemmy_client.models.errors import LemmyErrorBody

R = TypeVar("R")
T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[R]):
    """A successful call carrying the decoded response."""

    value: R

    def is_ok(self) -> bool:
        """Return True; the call succeeded."""
        return True

    def is_err(self) -> bool:
        """Return False; the call succeeded."""
        return False

    def unwrap(self) -> R:
        """Return the decoded response."""
        return self.value

    def unwrap_or(self, default: Any) -> R:
        """Return the decoded response, ignoring ``default``."""
        return self.value


@dataclass(frozen=True)
class Err:
    """A failed call carrying a ``LemmyApiError`` or ``LemmyOtherError``."""

    error: LemmyApiError | LemmyOtherError

    def is_ok(self) -> bool:
        """Return False; the call failed."""
        return False

    def is_err(self) -> bool:
        """Return True; the call failed."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise the carried error.

        Raises:
            LemmyApiError: If the instance rejected the request.
            LemmyOtherError: If sending or decoding failed.
        """
        raise self.error

    def unwrap_or(self, default: T) -> T:
        """Return ``default`` in place of the missing response."""
        return default


LemmyResult = Union[Ok[R], Err]


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def _match_error(data: Any) -> LemmyErrorBody | None:
    if not isinstance(data, dict) or "error" not in data:
        return None
    try:
        return LemmyErrorBody.model_validate(data)
    except ValidationError:
        return None


def decode_response(
    content: str | bytes,
    response_type: type[R] | Any,
    *,
    status_code: int | None = None,
) -> LemmyResult[R]:
    """Decode a response body into ``Ok`` or ``Err``.

    Args:
        content: Raw response body.
        response_type: Expected type of a successful response.
        status_code: HTTP status, attached to errors for diagnostics only.

    Returns:
        ``Ok`` with the validated response, or ``Err``.
    """
    try:
        data = json.loads(content)
    except ValueError as e:
        return Err(
            LemmyOtherError(
                "Response body is not valid JSON", cause=e, status_code=status_code
            )
        )

    error_body = _match_error(data)
    if error_body is not None:
        return Err(
            LemmyApiError(error_body.error, error_body.message, status_code=status_code)
        )

    try:
        return Ok(_adapter(response_type).validate_python(data))
    except ValidationError as e:
        return Err(
            LemmyOtherError(
                f"Response did not match {getattr(response_type, '__name__', response_type)}",
                cause=e,
                status_code=status_code,
            )
        )
