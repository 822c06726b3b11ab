"""Tri-state optional values for request parameters.

A builder field is either unset (left out of the request), explicitly
``None`` (sent as JSON ``null``) or an explicit value.
"""

from __future__ import annotations

from typing import Any, Final, TypeVar

from .exceptions import InvalidArgumentError

T = TypeVar("T")


class Unset:
    """Marker type for a parameter that was never configured."""

    _instance: Unset | None = None

    def __new__(cls) -> Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"

    def __copy__(self) -> Unset:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Unset:
        return self


UNSET: Final = Unset()


def require(value: T | None, name: str) -> T:
    """Reject None (or UNSET) for a required argument."""
    if value is None or value is UNSET:
        raise InvalidArgumentError(f"{name} is required")
    return value


def drop_unset(fields: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of fields without UNSET entries; explicit None is kept."""
    return {k: v for k, v in fields.items() if v is not UNSET}
