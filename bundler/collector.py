"""
Source file collection.

Walks a root directory recursively and returns every regular file whose
extension is in the requested set, skipping build-output directories.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

from bundler.errors import BundleIOError

logger = logging.getLogger(__name__)

# Matched case-sensitively against directory names below the root.
EXCLUDED_DIRECTORIES = frozenset({"bin", "debug"})


@dataclass(frozen=True)
class FileEntry:
    """A discovered source file.

    Attributes:
        path: Absolute path of the file
        relative_path: Path relative to the collection root
    """
    path: Path
    relative_path: str

    @property
    def extension(self) -> str:
        return self.path.suffix.lower()


def _raise_walk_error(error: OSError) -> None:
    raise error


def collect_files(
    root: Union[str, Path],
    extensions: Iterable[str],
    exclude: Optional[Union[str, Path]] = None,
) -> list[FileEntry]:
    """
    Collect matching files below ``root``.

    Args:
        root: Directory to walk
        extensions: Extensions to keep, e.g. {".py", ".js"}
        exclude: A single file never to collect (the bundle output)

    Returns:
        FileEntry list in walk order; empty if nothing matched

    Raises:
        BundleIOError: If the root or a directory below it cannot be read
    """
    root = Path(root).absolute()
    wanted = {ext.lower() for ext in extensions}
    excluded_file = Path(exclude).resolve() if exclude is not None else None

    if not root.is_dir():
        raise BundleIOError(
            f"Root directory not found: {root}",
            path=str(root),
            original_error=FileNotFoundError(str(root)),
        )

    entries: list[FileEntry] = []
    try:
        for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
            dirnames[:] = [d for d in dirnames if d not in EXCLUDED_DIRECTORIES]
            for filename in filenames:
                path = Path(dirpath) / filename
                if path.suffix.lower() not in wanted or not path.is_file():
                    continue
                if excluded_file is not None and path.resolve() == excluded_file:
                    logger.debug(f"Skipping bundle output: {path}")
                    continue
                entries.append(FileEntry(path=path, relative_path=os.path.relpath(path, root)))
    except OSError as e:
        raise BundleIOError(
            f"Failed to read directory: {e}",
            path=getattr(e, "filename", None),
            original_error=e,
        ) from e

    logger.info(f"Collected {len(entries)} files from {root}")
    return entries
