"""Application configuration."""

from .settings import Settings, parse_settings

__all__ = ["Settings", "parse_settings"]
