"""Tests for ServerReport and CertExpiryReport entities."""

from __future__ import annotations

from collections.abc import Callable

from certs_cli.domain.entities import CertEntry, CertExpiryReport, ReportSummary, ServerReport
from certs_cli.domain.value_objects import CertCategory


class TestServerReport:
    """Tests for ServerReport entity."""

    def test_empty_categories_are_empty_tuples(self) -> None:
        """A server without entries has empty categories."""
        server = ServerReport()
        for category in CertCategory:
            assert server.entries(category) == ()
        assert server.total_entries == 0

    def test_entries_by_category(self, make_server: Callable[..., ServerReport]) -> None:
        """entries() should return the tuple of the requested category."""
        router = (CertEntry(cert_cn="router-a"), CertEntry(cert_cn="router-b"))
        server = make_server(router=router, etcd=(CertEntry(cert_cn="etcd"),))

        assert server.entries(CertCategory.ROUTER) == router
        assert server.entries(CertCategory.ETCD)[0].cert_cn == "etcd"
        assert server.entries(CertCategory.REGISTRY) == ()
        assert server.total_entries == 3


class TestCertExpiryReport:
    """Tests for CertExpiryReport aggregate."""

    def test_server_names_are_sorted(self) -> None:
        """Server names should be returned in lexicographic order."""
        report = CertExpiryReport(
            servers={"node-b": ServerReport(), "master-1": ServerReport(), "node-a": ServerReport()},
        )
        assert report.server_names == ["master-1", "node-a", "node-b"]

    def test_summary_is_passed_through(self) -> None:
        """Summary counters are kept as delivered, not recomputed."""
        report = CertExpiryReport(summary=ReportSummary(expired=3, ok=1, total=99, warning=0))
        assert report.summary.total == 99
        assert report.total_entries == 0

    def test_total_entries_across_servers(self) -> None:
        """total_entries counts entries of every server."""
        report = CertExpiryReport(
            servers={
                "a": ServerReport(etcd=(CertEntry(),)),
                "b": ServerReport(kubeconfigs=(CertEntry(), CertEntry())),
            },
        )
        assert report.total_entries == 3
