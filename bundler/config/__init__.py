"""Bundle configuration: schema and command-line resolution."""

from .schema import BundleConfig, SortMode
from .resolver import resolve_config, NO_VALID_LANGUAGES

__all__ = ["BundleConfig", "SortMode", "resolve_config", "NO_VALID_LANGUAGES"]
