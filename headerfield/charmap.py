"""Byte classification tables for header field names and values.

Each table is a 256-byte ``bytes`` object indexed by input byte. An entry of
0 marks the byte as illegal in that context; every other entry is the byte
itself.
"""

from __future__ import annotations

import string

REJECTED = 0


def _identity_map(accepted: bytes) -> bytes:
    table = bytearray(256)
    for b in accepted:
        table[b] = b
    return bytes(table)


_NAME_ALPHABET = (string.ascii_letters + string.digits + "-_").encode("ascii")
_VALUE_ALPHABET = b"\t" + bytes(range(0x20, 0x7F))

HEADER_FIELD_NAME_CHARACTER_MAP: bytes = _identity_map(_NAME_ALPHABET)
HEADER_FIELD_VALUE_CHARACTER_MAP: bytes = _identity_map(_VALUE_ALPHABET)


def classify(table: bytes, byte: int) -> int:
    """Return the output byte for *byte*, or 0 if it is not accepted."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte must be in range(256), got {byte}")
    return table[byte]


def normalize(table: bytes, raw: bytes) -> bytes:
    """Classify every byte of *raw*; rejected bytes become 0."""
    return bytes(raw).translate(table)


def is_accepted(table: bytes, raw: bytes) -> bool:
    return REJECTED not in normalize(table, raw)


def strip_rejected(data: bytes) -> bytes:
    """Drop every 0 byte, keeping the order of the rest."""
    return data.replace(b"\x00", b"")
