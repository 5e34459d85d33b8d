"""Certificate category value object."""

from enum import StrEnum


class CertCategory(StrEnum):
    """Category of certificates within a server report.

    Members are declared in reporting order; values match the JSON keys.
    """

    ETCD = "etcd"
    KUBECONFIGS = "kubeconfigs"
    OCP_CERTS = "ocp_certs"
    REGISTRY = "registry"
    ROUTER = "router"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Human-readable display name."""
        match self:
            case CertCategory.ETCD:
                return "etcd"
            case CertCategory.KUBECONFIGS:
                return "kubeconfigs"
            case CertCategory.OCP_CERTS:
                return "OCP certificates"
            case CertCategory.REGISTRY:
                return "registry"
            case CertCategory.ROUTER:
                return "router"
