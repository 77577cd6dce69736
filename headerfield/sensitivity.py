"""Decide which headers carry secrets and tag their values accordingly."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from headerfield.formats.header import Header
from headerfield.name import HeaderFieldName

DEFAULT_SENSITIVE_HEADERS = frozenset(
    {
        "authorization",
        "proxy-authorization",
        "cookie",
        "set-cookie",
        "x-api-key",
        "x-auth-token",
    }
)


def _fold(name: HeaderFieldName | str) -> str:
    text = name.as_utf8_str() if isinstance(name, HeaderFieldName) else name
    return text.strip().lower()


@dataclass(frozen=True)
class SensitivityPolicy:
    """Set of header names whose values are secret.

    Matching is case-insensitive; header names themselves are left untouched.
    """

    names: frozenset[str] = field(default_factory=lambda: DEFAULT_SENSITIVE_HEADERS)

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", frozenset(_fold(n) for n in self.names if _fold(n)))

    def with_names(self, extra: Iterable[str]) -> SensitivityPolicy:
        return SensitivityPolicy(names=self.names | frozenset(extra))

    def is_sensitive(self, name: HeaderFieldName | str) -> bool:
        return _fold(name) in self.names

    def protect(self, header: Header) -> Header:
        """Mark the header's value secret when its name is sensitive."""
        if self.is_sensitive(header.name) and not header.is_secret():
            return header.into_secret()
        return header
