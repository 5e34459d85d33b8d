"""Expiry threshold value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ExpiryThreshold:
    """Number of remaining days at or below which a certificate is reported."""

    days: int = 90
