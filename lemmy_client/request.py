"""Request envelope sent through the client."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel

FormT = TypeVar("FormT", bound=BaseModel)


@dataclass
class LemmyRequest(Generic[FormT]):
    """A form plus an optional token for a single call.

    When ``jwt`` is set it takes priority over the token configured on the
    client, for this call only.
    """

    body: FormT | None = None
    jwt: str | None = None

    @classmethod
    def empty(cls, jwt: str | None = None) -> "LemmyRequest[FormT]":
        """Request for endpoints that take no form."""
        return cls(body=None, jwt=jwt)


def as_request(request: "LemmyRequest[FormT] | FormT | None") -> LemmyRequest[FormT]:
    """Normalize a bare form, a request or None into a ``LemmyRequest``."""
    if isinstance(request, LemmyRequest):
        return request
    if request is None:
        return LemmyRequest()
    if not isinstance(request, BaseModel):
        raise TypeError(
            f"Expected a pydantic form or LemmyRequest, got {type(request).__name__}"
        )
    return LemmyRequest(body=request)
