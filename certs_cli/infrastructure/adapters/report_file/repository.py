"""JSON file report repository implementation."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from ....application.exceptions import DecodeError, FileAccessError
from ....domain.entities import (
    CertEntry,
    CertExpiryReport,
    ReportMeta,
    ReportSummary,
    ServerReport,
)
from .models import CertEntryModel, ReportDocument, ServerModel

logger = logging.getLogger(__name__)


class JsonFileReportRepository:
    """
    Report repository reading the JSON file written by the expiry playbook.

    Implements the ReportRepository port.
    """

    def __init__(self, path: str | Path) -> None:
        """
        Initialize the repository.

        Args:
            path: Location of the JSON report. It does not need to exist yet.
        """
        self._path = Path(path)

    def load(self) -> CertExpiryReport:
        """
        Read and decode the report.

        Returns:
            The decoded report.

        Raises:
            FileAccessError: If the file cannot be read.
            DecodeError: If the content is not a valid report document.
        """
        try:
            raw = self._path.read_bytes()
        except OSError as e:
            msg = f"Can't open the JSON file ({e})."
            raise FileAccessError(msg) from e

        logger.debug("Read %d bytes from %s", len(raw), self._path)

        try:
            document = ReportDocument.model_validate_json(raw)
        except ValidationError as e:
            msg = f"Can't decode the JSON file ({e})."
            raise DecodeError(msg) from e

        return self._map_report(document)

    def _map_report(self, document: ReportDocument) -> CertExpiryReport:
        """Map the wire document to the domain aggregate."""
        summary = document.summary
        return CertExpiryReport(
            servers={name: self._map_server(server) for name, server in document.data.items()},
            summary=ReportSummary(
                expired=summary.expired,
                ok=summary.ok,
                total=summary.total,
                warning=summary.warning,
            ),
        )

    def _map_server(self, server: ServerModel) -> ServerReport:
        """Map a server model to a ServerReport."""
        meta = server.meta
        return ServerReport(
            etcd=self._map_entries(server.etcd),
            kubeconfigs=self._map_entries(server.kubeconfigs),
            ocp_certs=self._map_entries(server.ocp_certs),
            registry=self._map_entries(server.registry),
            router=self._map_entries(server.router),
            meta=ReportMeta(
                checked_at_time=meta.checked_at_time,
                show_all=meta.show_all,
                warn_before_date=meta.warn_before_date,
                warning_days=meta.warning_days,
            ),
        )

    @staticmethod
    def _map_entries(entries: list[CertEntryModel]) -> tuple[CertEntry, ...]:
        """Map entry models to CertEntry objects, keeping document order."""
        return tuple(
            CertEntry(
                cert_cn=entry.cert_cn,
                days_remaining=entry.days_remaining,
                expiry=entry.expiry,
                health=entry.health,
                path=entry.path,
                serial=entry.serial,
                serial_hex=entry.serial_hex,
            )
            for entry in entries
        )
