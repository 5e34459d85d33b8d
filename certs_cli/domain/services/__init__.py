"""Domain services - Stateless operations on domain objects."""

from .expiry_classifier import ExpiryClassifier
from .staleness_checker import StalenessChecker

__all__ = ["ExpiryClassifier", "StalenessChecker"]
