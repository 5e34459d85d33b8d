"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

import pytest

from certs_cli.domain.entities import CertEntry, CertExpiryReport, ReportMeta, ServerReport
from certs_cli.domain.value_objects import ExpiryThreshold, LogSeverity
from certs_cli.infrastructure.adapters.log_sink.setup import APP_LOGGER_NAME

FRESH_CHECKED_AT = "2025-06-01 12:00:00.000000"
NOW = datetime(2025, 6, 1, 18, 0, 0)


@dataclass
class EmittedLine:
    """A line captured by RecordingSink."""

    severity: LogSeverity
    template: str
    args: tuple[object, ...]

    @property
    def message(self) -> str:
        return self.template % self.args


@dataclass
class RecordingSink:
    """ReportSink that keeps every emitted line."""

    lines: list[EmittedLine] = field(default_factory=list)

    def emit(self, severity: LogSeverity, template: str, *args: object) -> None:
        self.lines.append(EmittedLine(severity, template, args))

    def at(self, severity: LogSeverity) -> list[EmittedLine]:
        return [line for line in self.lines if line.severity is severity]


@dataclass
class FakeReportRepository:
    """ReportRepository returning a fixed report or raising a fixed error."""

    report: CertExpiryReport | None = None
    error: Exception | None = None
    calls: int = 0

    def load(self) -> CertExpiryReport:
        self.calls += 1
        if self.error is not None:
            raise self.error
        assert self.report is not None
        return self.report


@pytest.fixture(autouse=True)
def reset_app_logger() -> Iterator[None]:
    """Drop handlers installed by configure_logging between tests."""
    yield
    app_logger = logging.getLogger(APP_LOGGER_NAME)
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
    app_logger.setLevel(logging.NOTSET)


@pytest.fixture
def default_threshold() -> ExpiryThreshold:
    """Default expiry threshold."""
    return ExpiryThreshold(days=90)


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock frozen a few hours after FRESH_CHECKED_AT."""
    return lambda: NOW


@pytest.fixture
def recording_sink() -> RecordingSink:
    """Sink capturing emitted lines."""
    return RecordingSink()


@pytest.fixture
def etcd_entry() -> CertEntry:
    """An etcd peer certificate expiring in 10 days."""
    return CertEntry(
        cert_cn="etcd-peer",
        days_remaining=10,
        expiry="2025-01-01",
        health="warning",
        path="/etc/etcd/peer.crt",
        serial=11.0,
        serial_hex="0xb",
    )


@pytest.fixture
def make_server() -> Callable[..., ServerReport]:
    """Factory for server reports with a fresh timestamp by default."""

    def _make(checked_at: str = FRESH_CHECKED_AT, **categories: tuple[CertEntry, ...]) -> ServerReport:
        return ServerReport(meta=ReportMeta(checked_at_time=checked_at, warning_days=90), **categories)

    return _make


def entry_json(cn: str, days: int, **overrides: Any) -> dict[str, Any]:
    """Build a certificate entry as written by the report generator."""
    entry = {
        "cert_cn": cn,
        "days_remaining": days,
        "expiry": "2025-01-01 10:00:00",
        "health": "ok",
        "path": f"/etc/origin/{cn}.crt",
        "serial": 42,
        "serial_hex": "0x2a",
    }
    entry.update(overrides)
    return entry


def server_json(checked_at: str = FRESH_CHECKED_AT, **categories: list[dict[str, Any]]) -> dict[str, Any]:
    """Build a server report as written by the report generator."""
    server: dict[str, Any] = {
        "etcd": [],
        "kubeconfigs": [],
        "meta": {
            "checked_at_time": checked_at,
            "show_all": "False",
            "warn_before_date": "2025-08-30 12:00:00.000000",
            "warning_days": 90,
        },
        "ocp_certs": [],
        "registry": [],
        "router": [],
    }
    server.update(categories)
    return server


@pytest.fixture
def write_report(tmp_path: Path) -> Callable[[Any], Path]:
    """Write a report document (dict or raw text) and return its path."""

    def _write(document: Any, name: str = "cert-expiry-report.json") -> Path:
        path = tmp_path / name
        text = document if isinstance(document, str) else json.dumps(document)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture(name="entry_json")
def entry_json_fixture() -> Callable[..., dict[str, Any]]:
    """Factory for JSON certificate entries."""
    return entry_json


@pytest.fixture(name="server_json")
def server_json_fixture() -> Callable[..., dict[str, Any]]:
    """Factory for JSON server reports."""
    return server_json


@pytest.fixture
def fake_repository() -> Callable[..., FakeReportRepository]:
    """Factory for fake report repositories."""

    def _make(report: CertExpiryReport | None = None, error: Exception | None = None) -> FakeReportRepository:
        return FakeReportRepository(report=report, error=error)

    return _make
