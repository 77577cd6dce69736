"""Header field values and their secrecy tag."""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

from headerfield.charmap import HEADER_FIELD_VALUE_CHARACTER_MAP
from headerfield.errors import InvalidHeaderFieldValue
from headerfield.field import HeaderField, RawInput

REDACTED = "<REDACTED>"

V = TypeVar("V", bound="HeaderFieldValue")


class Visibility(Enum):
    VISIBLE = "visible"
    SECRET = "secret"


class HeaderFieldValue(HeaderField):
    """A header field value made of tab and printable ASCII (0x20-0x7E).

    A value is either visible or secret. A secret value renders as
    ``<REDACTED>`` through ``str``, ``repr``, ``format`` and pydantic
    serialization; its bytes are still available through ``as_bytes``,
    ``as_utf8_str`` and ``into_inner``. The tag has no effect on equality,
    hashing or ordering.
    """

    __slots__ = ("_visibility",)

    _table = HEADER_FIELD_VALUE_CHARACTER_MAP
    _error = InvalidHeaderFieldValue

    _visibility: Visibility

    def __init__(self, raw: RawInput) -> None:
        super().__init__(raw)
        object.__setattr__(self, "_visibility", Visibility.VISIBLE)

    @classmethod
    def _new(cls: type[V], data: bytes, visibility: Visibility = Visibility.VISIBLE) -> V:
        obj = super()._new(data)
        object.__setattr__(obj, "_visibility", visibility)
        return obj

    def _replace(self: V, data: bytes) -> V:
        return self._new(data, self._visibility)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self)._new, (self._data, self._visibility))

    @property
    def visibility(self) -> Visibility:
        return self._visibility

    def is_secret(self) -> bool:
        """Return True if the value is sensitive and must not be displayed."""
        return self._visibility is Visibility.SECRET

    def into_secret(self: V) -> V:
        """Return the same content tagged secret."""
        return self._new(self._data, Visibility.SECRET)

    def into_visible(self: V) -> V:
        """Return the same content tagged visible (the default)."""
        return self._new(self._data, Visibility.VISIBLE)

    def __str__(self) -> str:
        if self.is_secret():
            return REDACTED
        return self.as_utf8_str()
