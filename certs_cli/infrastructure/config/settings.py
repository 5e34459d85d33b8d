"""Application settings parsed from the command line."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from functools import cached_property

from ...application.exceptions import ConfigurationError
from ...domain.value_objects import ExpiryThreshold

DEFAULT_REPORT_FILE = "/tmp/cert-expiry-report.json"  # noqa: S108
DEFAULT_EXPIRY_DAYS = 90
DEFAULT_SYSLOG_IDENT = "openshift-monitoring-cli"

DESCRIPTION = (
    "This cli parses 'cert-expiry-report.json' and outputs expired certs. "
    "OpenShift uses SSL certificates for encrypting communication between its "
    "components. It's crucial to monitor their expiry date and renew them as "
    "needed. The JSON file is generated via "
    "playbooks/certificate_expiry/easy-mode.yaml."
)


@dataclass
class Settings:
    """Application settings container."""

    report_file: str = DEFAULT_REPORT_FILE
    expiry_days: int = DEFAULT_EXPIRY_DAYS
    debug: bool = False
    syslog_ident: str = DEFAULT_SYSLOG_IDENT

    def validate(self) -> None:
        """Validate settings."""
        if not self.report_file.strip():
            msg = "Report file path must not be empty"
            raise ConfigurationError(msg)

    @cached_property
    def threshold(self) -> ExpiryThreshold:
        """Get expiry threshold."""
        return ExpiryThreshold(days=self.expiry_days)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(prog="certs-cli", description=DESCRIPTION)
    parser.add_argument(
        "-f",
        "--file",
        dest="report_file",
        default=DEFAULT_REPORT_FILE,
        help=f"location of the JSON file (default is {DEFAULT_REPORT_FILE})",
    )
    parser.add_argument(
        "-e",
        "--expiry",
        dest="expiry_days",
        type=int,
        default=DEFAULT_EXPIRY_DAYS,
        help="number of days left before cert expires (default is %(default)s)",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="print debug messages",
    )
    return parser


def parse_settings(argv: Sequence[str] | None = None) -> Settings:
    """Parse command line arguments into settings."""
    args = build_parser().parse_args(argv)
    settings = Settings(
        report_file=args.report_file,
        expiry_days=args.expiry_days,
        debug=args.debug,
    )
    settings.validate()
    return settings
