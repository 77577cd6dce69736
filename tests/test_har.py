"""Tests for HAR header auditing."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from headerfield.har import RawHeader, audit_header, audit_headers, iter_har_headers
from headerfield.sensitivity import SensitivityPolicy
from tests.conftest import make_entry


class TestIterHarHeaders:
    def test_order_and_direction(self, har_file: Path) -> None:
        raw = list(iter_har_headers(har_file))
        assert [(r.entry, r.direction, r.name) for r in raw] == [
            (0, "request", "Authorization"),
            (0, "request", "Accept"),
            (0, "response", "Content-Type"),
            (1, "request", "X-Trace Id"),
            (1, "request", "Cookie"),
        ]

    def test_raw_value_hidden_from_repr(self) -> None:
        raw = RawHeader(entry=0, direction="request", name="Cookie", value="sid=1")
        assert "sid=1" not in repr(raw)

    def test_bare_log_document(self, tmp_path: Path) -> None:
        path = tmp_path / "bare.har"
        path.write_text(json.dumps({"entries": [make_entry(request_headers=[{"name": "A", "value": "1"}])]}))
        assert [r.name for r in iter_har_headers(path)] == ["A"]

    def test_skips_malformed(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = tmp_path / "odd.har"
        entry = make_entry(request_headers=[{"value": "no name"}, {"name": "B"}])  # type: ignore[list-item]
        path.write_text(json.dumps({"log": {"entries": [entry]}}))
        with caplog.at_level(logging.DEBUG, logger="headerfield.har"):
            raw = list(iter_har_headers(path))
        assert [(r.name, r.value) for r in raw] == [("B", "")]
        assert "malformed" in caplog.text
        assert "no response headers" in caplog.text

    def test_null_log(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = tmp_path / "null.har"
        path.write_text(json.dumps({"log": None}))
        with caplog.at_level(logging.WARNING, logger="headerfield.har"):
            assert list(iter_har_headers(path)) == []
        assert "not an object" in caplog.text

    def test_malformed_entries_and_messages(self, tmp_path: Path) -> None:
        good = make_entry(request_headers=[{"name": "A", "value": "1"}])
        odd = {"request": "GET /", "response": {"headers": {"name": "B"}}}
        path = tmp_path / "mixed.har"
        path.write_text(json.dumps({"log": {"entries": [None, "x", odd, good]}}))
        assert [(r.entry, r.name) for r in iter_har_headers(path)] == [(3, "A")]

    def test_entries_not_a_list(self, tmp_path: Path) -> None:
        path = tmp_path / "dict.har"
        path.write_text(json.dumps({"log": {"entries": {"0": {}}}}))
        assert list(iter_har_headers(path)) == []

    def test_null_value_is_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "nullvalue.har"
        entry = make_entry(request_headers=[{"name": "A", "value": None}])  # type: ignore[list-item]
        path.write_text(json.dumps({"log": {"entries": [entry]}}))
        assert [r.value for r in iter_har_headers(path)] == [""]

    def test_not_a_har(self, tmp_path: Path) -> None:
        path = tmp_path / "list.har"
        path.write_text("[]")
        with pytest.raises(ValueError):
            list(iter_har_headers(path))


class TestAuditHeader:
    def test_valid_plain(self) -> None:
        f = audit_header(RawHeader(0, "request", "Accept", "*/*"), SensitivityPolicy())
        assert f.ok
        assert f.header is not None
        assert str(f.header) == "Accept: */*"
        assert f.location == "#0 request"

    def test_valid_sensitive(self) -> None:
        f = audit_header(RawHeader(0, "request", "authorization", "Bearer x"), SensitivityPolicy())
        assert f.ok
        assert f.value.is_secret()
        assert f.header is not None and f.header.is_secret()
        assert f.value.as_utf8_str() == "Bearer x"

    def test_invalid_name(self) -> None:
        f = audit_header(RawHeader(1, "response", "X Trace", "abc"), SensitivityPolicy())
        assert f.problems == ["invalid name"]
        assert f.header is None
        assert f.name.as_utf8_str() == "XTrace"

    def test_invalid_sensitive_value_redacted(self) -> None:
        f = audit_header(RawHeader(1, "request", "Cookie", "sid=s3cr3t\r\n"), SensitivityPolicy())
        assert f.problems == ["invalid value"]
        assert f.value.is_secret()
        assert f.value.as_utf8_str() == "sid=s3cr3t"
        assert "s3cr3t" not in repr(f)

    def test_malformed_sensitive_name_redacted(self) -> None:
        f = audit_header(RawHeader(0, "request", "Cookie:", "sid=hunter2"), SensitivityPolicy())
        assert f.problems == ["invalid name"]
        assert f.name.as_utf8_str() == "Cookie"
        assert f.value.is_secret()
        assert str(f.value) == "<REDACTED>"
        assert "hunter2" not in repr(f)

    def test_both_invalid(self) -> None:
        f = audit_header(RawHeader(0, "request", "é", "\x01"), SensitivityPolicy())
        assert f.problems == ["invalid name", "invalid value"]
        assert len(f.name) == 0
        assert len(f.value) == 0


class TestAuditHeaders:
    def test_file(self, har_file: Path) -> None:
        findings = audit_headers(iter_har_headers(har_file), SensitivityPolicy())
        assert [f.ok for f in findings] == [True, True, True, False, False]
        assert [f.value.is_secret() for f in findings] == [True, False, False, False, True]

    def test_custom_policy(self, har_file: Path) -> None:
        policy = SensitivityPolicy(names=frozenset({"accept"}))
        findings = audit_headers(iter_har_headers(har_file), policy)
        assert [f.value.is_secret() for f in findings] == [False, True, False, False, False]


class TestScanRobustness:
    def test_null_log_scans_nothing(self, tmp_path: Path) -> None:
        from click.testing import CliRunner

        from headerfield.main import cli

        path = tmp_path / "null.har"
        path.write_text(json.dumps({"log": None}))
        result = CliRunner().invoke(cli, ["scan", str(path)])
        assert result.exit_code == 0
        assert "0 headers, 0 invalid" in result.output
