"""Shared test fixtures for headerfield tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


def make_entry(
    request_headers: list[dict[str, str]] | None = None,
    response_headers: list[dict[str, str]] | None = None,
    url: str = "https://api.example.com/users",
) -> dict:
    """Helper to create a HAR entry with minimal boilerplate."""
    return {
        "startedDateTime": "2026-02-13T15:30:00.000Z",
        "time": 150,
        "request": {
            "method": "GET",
            "url": url,
            "httpVersion": "HTTP/1.1",
            "headers": request_headers or [],
        },
        "response": {
            "status": 200,
            "statusText": "OK",
            "httpVersion": "HTTP/1.1",
            "headers": response_headers or [],
        },
    }


@pytest.fixture
def sample_har() -> dict:
    return {
        "log": {
            "version": "1.2",
            "creator": {"name": "Chrome", "version": "133.0"},
            "entries": [
                make_entry(
                    request_headers=[
                        {"name": "Authorization", "value": "Bearer token123"},
                        {"name": "Accept", "value": "application/json"},
                    ],
                    response_headers=[
                        {"name": "Content-Type", "value": "application/json"},
                    ],
                ),
                make_entry(
                    request_headers=[
                        {"name": "X-Trace Id", "value": "abc"},
                        {"name": "Cookie", "value": "session=s3cr3t\r\n"},
                    ],
                ),
            ],
        }
    }


@pytest.fixture
def har_file(tmp_path: Path, sample_har: dict) -> Path:
    path = tmp_path / "capture.har"
    path.write_text(json.dumps(sample_har))
    return path


@pytest.fixture
def clean_har_file(tmp_path: Path) -> Path:
    har = {
        "log": {
            "entries": [
                make_entry(
                    request_headers=[
                        {"name": "Authorization", "value": "Bearer token123"},
                        {"name": "Accept", "value": "*/*"},
                    ]
                )
            ]
        }
    }
    path = tmp_path / "clean.har"
    path.write_text(json.dumps(har))
    return path
