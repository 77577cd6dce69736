"""Pydantic model for a single validated header field."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from headerfield.name import HeaderFieldName
from headerfield.value import HeaderFieldValue


class Header(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: HeaderFieldName
    value: HeaderFieldValue

    @classmethod
    def from_raw(cls, name: str | bytes, value: str | bytes) -> Header:
        """Validate a raw name/value pair, raising on the first illegal field."""
        return cls(
            name=HeaderFieldName(name),
            value=HeaderFieldValue(value),
        )

    def into_secret(self) -> Header:
        return self.model_copy(update={"value": self.value.into_secret()})

    def into_visible(self) -> Header:
        return self.model_copy(update={"value": self.value.into_visible()})

    def is_secret(self) -> bool:
        return self.value.is_secret()

    def __str__(self) -> str:
        return f"{self.name}: {self.value}"
