"""
BundleWriter - concatenates collected source files into one bundle.

This module provides functionality for:
- Ordering files by name or by type
- Reading source files line by line
- Optional empty-line removal
- Author header and per-file origin comments
- Removing a partially written bundle when writing fails
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

from bundler.collector import FileEntry, collect_files
from bundler.config.schema import BundleConfig, SortMode
from bundler.errors import BundleIOError, NoFilesFoundError
from bundler.utils.logging_config import logging_config


logger = logging.getLogger(__name__)

COMMENT_PREFIX = "//"
NO_FILES_FOUND = "No code files found to bundle."


@dataclass
class BundleResult:
    """Result of a bundle run.

    Attributes:
        output_path: Path of the written bundle
        file_count: Number of source files bundled
        line_count: Number of lines written, separators and comments included
    """
    output_path: Path
    file_count: int
    line_count: int


def order_files(files: Iterable[FileEntry], sort_mode: SortMode) -> list[FileEntry]:
    """Order files by full path, or by extension and then full path."""
    if sort_mode is SortMode.TYPE:
        return sorted(files, key=lambda entry: (entry.extension, str(entry.path)))
    return sorted(files, key=lambda entry: str(entry.path))


def read_source_lines(path: Union[str, Path]) -> list[str]:
    """Read a source file as a list of lines without line terminators.

    A trailing newline does not produce a final empty line.
    """
    with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
        content = f.read()
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def strip_empty_lines(lines: Iterable[str]) -> list[str]:
    """Drop lines that are empty or contain only whitespace."""
    return [line for line in lines if line.strip()]


def comment(text: str) -> str:
    return f"{COMMENT_PREFIX} {text}"


def write_bundle(files: Iterable[FileEntry], config: BundleConfig) -> BundleResult:
    """
    Write the bundle described by ``config`` from ``files``.

    Args:
        files: Collected source files, in any order
        config: Resolved bundle configuration

    Returns:
        BundleResult for the written file

    Raises:
        NoFilesFoundError: If ``files`` is empty
        BundleIOError: If a source file cannot be read or the bundle
            cannot be written; a partial bundle is removed
    """
    ordered = order_files(files, config.sort_mode)
    if not ordered:
        raise NoFilesFoundError(
            NO_FILES_FOUND, root=str(config.root), extensions=config.extensions
        )

    output_path = config.output
    created = False
    current = output_path
    line_count = 0

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8", newline="\n") as out:
            created = True

            if config.author:
                out.write(comment(f"Author: {config.author}") + "\n")
                line_count += 1

            for entry in ordered:
                current = entry.path
                if config.note:
                    out.write(comment(f"Source: {entry.relative_path}") + "\n")
                    line_count += 1

                lines = read_source_lines(entry.path)
                if config.remove_empty_lines:
                    lines = strip_empty_lines(lines)

                for line in lines:
                    out.write(line + "\n")
                out.write("\n")
                line_count += len(lines) + 1
                logger.debug(f"Bundled {entry.relative_path} ({len(lines)} lines)")

            current = output_path
    except OSError as e:
        logger.error(f"Failed to write bundle while processing {current}: {e}")
        if created:
            _remove_partial_output(output_path)
        raise BundleIOError(str(e), path=str(current), original_error=e) from e

    logger.info(f"Wrote {len(ordered)} files to: {output_path}")
    return BundleResult(output_path=output_path, file_count=len(ordered), line_count=line_count)


def _remove_partial_output(output_path: Path) -> None:
    try:
        output_path.unlink(missing_ok=True)
        logger.info(f"Removed partial bundle: {output_path}")
    except OSError as e:
        logger.warning(f"Could not remove partial bundle {output_path}: {e}")


def bundle(config: BundleConfig) -> BundleResult:
    """Collect the files ``config`` selects and write them as one bundle."""
    logging_config.log_configuration_details({
        "root": config.root,
        "languages": ", ".join(sorted(config.languages)),
        "extensions": ", ".join(sorted(config.extensions)),
        "output": config.output,
        "note": config.note,
        "sort": config.sort_mode.value,
        "remove_empty_lines": config.remove_empty_lines,
        "author": config.author,
    })

    start = time.time()
    files = collect_files(config.root, config.extensions, exclude=config.output)
    result = write_bundle(files, config)
    logging_config.log_operation_timing("Bundling", time.time() - start)
    return result
