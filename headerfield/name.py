"""Header field names."""

from __future__ import annotations

from headerfield.charmap import HEADER_FIELD_NAME_CHARACTER_MAP
from headerfield.errors import InvalidHeaderFieldName
from headerfield.field import HeaderField


class HeaderFieldName(HeaderField):
    """A header field name made only of ASCII letters, digits, ``-`` and ``_``.

    Names built through ``from_bytes_unchecked`` or ``from_static`` may hold
    null placeholders until ``clean`` is called.
    """

    __slots__ = ()

    _table = HEADER_FIELD_NAME_CHARACTER_MAP
    _error = InvalidHeaderFieldName
