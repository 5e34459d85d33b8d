"""Wire models of the certificate expiry report JSON document."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class _ReportModel(BaseModel):
    """Base for report models: strict types, missing or null fields defaulted, unknown fields ignored."""

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        """Read a JSON null as the field's zero value."""
        if value is None and info.field_name is not None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class CertEntryModel(_ReportModel):
    """One certificate observation."""

    cert_cn: str = ""
    days_remaining: int = 0
    expiry: str = ""
    health: str = ""
    path: str = ""
    serial: float = 0.0
    serial_hex: str = ""


class ServerMetaModel(_ReportModel):
    """Metadata block of a server report."""

    checked_at_time: str = ""
    show_all: str = ""
    warn_before_date: str = ""
    warning_days: int = 0


class ServerModel(_ReportModel):
    """Certificate inventory of one server."""

    etcd: list[CertEntryModel] = Field(default_factory=list)
    kubeconfigs: list[CertEntryModel] = Field(default_factory=list)
    meta: ServerMetaModel = Field(default_factory=ServerMetaModel)
    ocp_certs: list[CertEntryModel] = Field(default_factory=list)
    registry: list[CertEntryModel] = Field(default_factory=list)
    router: list[CertEntryModel] = Field(default_factory=list)


class SummaryModel(_ReportModel):
    """Summary counters computed by the report generator."""

    expired: int = 0
    ok: int = 0
    total: int = 0
    warning: int = 0


class ReportDocument(_ReportModel):
    """Top-level certificate expiry report."""

    data: dict[str, ServerModel] = Field(default_factory=dict, description="Reports keyed by server name")
    summary: SummaryModel = Field(default_factory=SummaryModel)
