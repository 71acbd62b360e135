"""Registry of types that may be decoded from a Lemmy response."""

from typing import Any

_RESPONSE_TYPES: set[Any] = set()


def register_response_types(*types: Any) -> None:
    """Register types as valid decoded responses.

    Args:
        *types: Pydantic models or other types pydantic can validate
            (``str``, ``list[Model]``).
    """
    _RESPONSE_TYPES.update(types)


def is_response_type(tp: Any) -> bool:
    return tp in _RESPONSE_TYPES
