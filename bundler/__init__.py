"""
Code bundler library.

Collects source files of selected languages below a root directory and
concatenates them into a single bundle file.
"""

from bundler.collector import FileEntry, collect_files
from bundler.config import BundleConfig, SortMode, resolve_config
from bundler.writer import BundleResult, bundle, order_files, write_bundle

__version__ = "1.0.0"

__all__ = [
    "BundleConfig",
    "BundleResult",
    "FileEntry",
    "SortMode",
    "bundle",
    "collect_files",
    "order_files",
    "resolve_config",
    "write_bundle",
]
