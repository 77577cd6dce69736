"""Validated header field names and values, with secret-aware rendering."""

from headerfield.charmap import (
    HEADER_FIELD_NAME_CHARACTER_MAP,
    HEADER_FIELD_VALUE_CHARACTER_MAP,
)
from headerfield.errors import (
    InvalidHeaderField,
    InvalidHeaderFieldName,
    InvalidHeaderFieldValue,
)
from headerfield.formats.header import Header
from headerfield.name import HeaderFieldName
from headerfield.sensitivity import DEFAULT_SENSITIVE_HEADERS, SensitivityPolicy
from headerfield.value import REDACTED, HeaderFieldValue, Visibility

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_SENSITIVE_HEADERS",
    "HEADER_FIELD_NAME_CHARACTER_MAP",
    "HEADER_FIELD_VALUE_CHARACTER_MAP",
    "REDACTED",
    "Header",
    "HeaderFieldName",
    "HeaderFieldValue",
    "InvalidHeaderField",
    "InvalidHeaderFieldName",
    "InvalidHeaderFieldValue",
    "SensitivityPolicy",
    "Visibility",
]
