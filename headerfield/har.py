"""Audit the header fields recorded in a HAR (HTTP Archive) file.

Every request and response header of every entry is run through the
validating constructors. Values of sensitive headers are tagged secret, so a
finding can be printed or dumped without leaking credentials.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from headerfield.errors import InvalidHeaderFieldName, InvalidHeaderFieldValue
from headerfield.formats.header import Header
from headerfield.name import HeaderFieldName
from headerfield.sensitivity import SensitivityPolicy
from headerfield.value import HeaderFieldValue

logger = logging.getLogger(__name__)

DIRECTIONS = ("request", "response")


@dataclass(frozen=True)
class RawHeader:
    """A header pair as found in the archive, before validation."""

    entry: int
    direction: str
    name: str
    value: str = field(repr=False)


@dataclass
class HeaderFinding:
    entry: int
    direction: str
    name: HeaderFieldName
    value: HeaderFieldValue
    header: Header | None = None
    problems: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.problems

    @property
    def location(self) -> str:
        return f"#{self.entry} {self.direction}"


def load_har(har_path: str | Path) -> dict:
    with open(har_path, encoding="utf-8") as f:
        har = json.load(f)
    if not isinstance(har, dict):
        raise ValueError(f"{har_path}: not a HAR document")
    return har


def iter_har_headers(har_path: str | Path) -> Iterator[RawHeader]:
    """Yield every request and response header of a HAR file, in file order."""
    har = load_har(har_path)
    log = har.get("log", har)
    if not isinstance(log, dict):
        logger.warning("%s: HAR log is not an object, nothing to scan", har_path)
        return
    entries = log.get("entries") or []
    if not isinstance(entries, list):
        logger.warning("%s: HAR entries is not a list, nothing to scan", har_path)
        return

    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            logger.warning("entry %d: skipping malformed entry", i)
            continue
        for direction in DIRECTIONS:
            message = entry.get(direction) or {}
            if not isinstance(message, dict):
                logger.warning("entry %d: skipping malformed %s", i, direction)
                continue
            headers = message.get("headers") or []
            if not isinstance(headers, list):
                logger.warning("entry %d: skipping malformed %s headers", i, direction)
                continue
            if not headers:
                logger.debug("entry %d has no %s headers", i, direction)
                continue
            for h in headers:
                if not isinstance(h, dict) or "name" not in h:
                    logger.warning("entry %d: skipping malformed %s header", i, direction)
                    continue
                yield RawHeader(
                    entry=i,
                    direction=direction,
                    name=str(h["name"]),
                    value=str(h.get("value") or ""),
                )


def audit_header(raw: RawHeader, policy: SensitivityPolicy) -> HeaderFinding:
    """Validate one raw header; sensitive values come back secret."""
    problems: list[str] = []

    try:
        name = HeaderFieldName.from_str(raw.name)
    except InvalidHeaderFieldName:
        name = HeaderFieldName.from_bytes_lossy(raw.name)
        problems.append("invalid name")

    sensitive = policy.is_sensitive(raw.name) or policy.is_sensitive(name)

    try:
        value = HeaderFieldValue.from_str(raw.value)
    except InvalidHeaderFieldValue:
        value = HeaderFieldValue.from_bytes_lossy(raw.value)
        problems.append("invalid value")

    if sensitive:
        value = value.into_secret()

    header = None
    if not problems:
        header = policy.protect(Header(name=name, value=value))

    return HeaderFinding(
        entry=raw.entry,
        direction=raw.direction,
        name=name,
        value=value,
        header=header,
        problems=problems,
    )


def audit_headers(
    raw_headers: Iterable[RawHeader], policy: SensitivityPolicy
) -> list[HeaderFinding]:
    findings = [audit_header(raw, policy) for raw in raw_headers]
    invalid = sum(1 for f in findings if not f.ok)
    if invalid:
        logger.info("%d of %d headers failed validation", invalid, len(findings))
    return findings
