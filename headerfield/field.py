"""Shared machinery for validated header field names and values."""

from __future__ import annotations

from functools import total_ordering
from typing import Any, ClassVar, TypeVar, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from headerfield.charmap import REJECTED, normalize, strip_rejected
from headerfield.errors import InvalidHeaderField

F = TypeVar("F", bound="HeaderField")

RawInput = Union[str, bytes, bytearray, memoryview]


def _as_bytes(raw: Any) -> bytes:
    if isinstance(raw, str):
        return raw.encode("utf-8")
    if isinstance(raw, (bytes, bytearray, memoryview)):
        return bytes(raw)
    raise TypeError(f"expected str or bytes-like object, got {type(raw).__name__}")


def _require_bytes(raw: Any) -> bytes:
    if isinstance(raw, (bytes, bytearray, memoryview)):
        return bytes(raw)
    raise TypeError(f"expected bytes-like object, got {type(raw).__name__}")


def _require_str(s: Any) -> str:
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    return s


@total_ordering
class HeaderField:
    """An immutable byte buffer checked against a classification table.

    Subclasses pick the table and the error raised on rejection. Calling the
    class directly validates its argument, like ``from_bytes``.
    """

    __slots__ = ("_data",)

    _table: ClassVar[bytes]
    _error: ClassVar[type[InvalidHeaderField]]

    _data: bytes

    def __init__(self, raw: RawInput) -> None:
        object.__setattr__(self, "_data", self._checked(_as_bytes(raw)))

    @classmethod
    def _checked(cls, raw: bytes) -> bytes:
        data = normalize(cls._table, raw)
        if REJECTED in data:
            raise cls._error()
        return data

    @classmethod
    def _new(cls: type[F], data: bytes) -> F:
        obj = object.__new__(cls)
        object.__setattr__(obj, "_data", data)
        return obj

    def _replace(self: F, data: bytes) -> F:
        """Build an instance of the same kind and state around *data*."""
        return self._new(data)

    # -- construction -----------------------------------------------------

    @classmethod
    def from_bytes(cls: type[F], raw: bytes | bytearray | memoryview) -> F:
        """Validate *raw*; any illegal byte raises and no instance is built."""
        return cls._new(cls._checked(_require_bytes(raw)))

    @classmethod
    def from_bytes_unchecked(cls: type[F], raw: bytes | bytearray | memoryview) -> F:
        """Classify *raw* without failing; illegal bytes become null bytes."""
        return cls._new(normalize(cls._table, _require_bytes(raw)))

    @classmethod
    def from_static(cls: type[F], s: str) -> F:
        """Build from a trusted literal; illegal characters become null bytes."""
        return cls.from_bytes_unchecked(_require_str(s).encode("utf-8"))

    @classmethod
    def from_str(cls: type[F], s: str) -> F:
        return cls.from_bytes(_require_str(s).encode("utf-8"))

    @classmethod
    def from_bytes_lossy(cls: type[F], raw: RawInput) -> F:
        """Classify without failing, then drop the null placeholders."""
        return cls._new(strip_rejected(normalize(cls._table, _as_bytes(raw))))

    # -- transformation ---------------------------------------------------

    def clean(self: F) -> F:
        """Return a copy with every null byte removed; may be shorter."""
        return self._replace(strip_rejected(self._data))

    def into_inner(self) -> bytes:
        return self._data

    # -- inspection -------------------------------------------------------

    def as_bytes(self) -> bytes:
        return self._data

    def as_utf8_str(self) -> str:
        # Table outputs are all ASCII.
        return self._data.decode("ascii")

    def __str__(self) -> str:
        return self.as_utf8_str()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return self._data

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data < other._data  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._data))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self)._new, (self._data,))

    def __copy__(self: F) -> F:
        return self

    def __deepcopy__(self: F, memo: dict[int, Any]) -> F:
        return self

    # -- pydantic ---------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _render, info_arg=False, when_used="always"
            ),
        )

    @classmethod
    def _coerce(cls: type[F], value: Any) -> F:
        if isinstance(value, cls):
            return value
        if isinstance(value, (str, bytes, bytearray)):
            return cls(value)
        raise ValueError(f"expected str, bytes or {cls.__name__}")


def _render(field: HeaderField) -> str:
    return str(field)
