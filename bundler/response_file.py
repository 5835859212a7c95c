"""
Response files for the bundle command.

A response file holds a saved ``bundle ...`` command line. The interactive
``create-rsp`` command builds one from free-text answers; the CLI expands
``@file`` tokens back into arguments.
"""

import logging
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

from bundler.languages import split_language_tokens

logger = logging.getLogger(__name__)

RESPONSE_FILE_NAME = "bundle.rsp"
RESPONSE_FILE_PREFIX = "@"


@dataclass
class ResponseAnswers:
    """Raw answers collected by the interactive prompts.

    No answer is validated; malformed booleans read as false and an empty
    sort order reads as the default.
    """
    languages: str = ""
    output: str = ""
    note: str = ""
    sort: str = ""
    remove_empty_lines: str = ""
    author: str = ""


def parse_flag(answer: Optional[str]) -> bool:
    """Only 'true' (any case) is true; everything else is false."""
    return (answer or "").strip().lower() == "true"


def build_response_command(answers: ResponseAnswers) -> str:
    """Build the single-line ``bundle`` command for a set of answers.

    Language and output are always present; the other flags only appear
    when they differ from their defaults.
    """
    languages = ",".join(split_language_tokens(answers.languages))
    command = f'bundle --language {languages} --output "{answers.output.strip()}"'

    if parse_flag(answers.note):
        command += " --note"

    sort = answers.sort.strip()
    if sort and sort.lower() != "name":
        command += f" --sort {sort}"

    if parse_flag(answers.remove_empty_lines):
        command += " --remove-empty-lines"

    author = answers.author.strip()
    if author:
        command += f' --author "{author}"'

    return command


def write_response_file(root: Union[str, Path], content: str) -> Path:
    """Write ``content`` to ``bundle.rsp`` in ``root``, replacing any existing file."""
    path = Path(root) / RESPONSE_FILE_NAME
    path.write_text(content, encoding="utf-8")
    logger.info(f"Response file written: {path}")
    return path


def read_response_file(path: Union[str, Path]) -> list[str]:
    """Split a response file into arguments.

    Each non-blank line is split shell-style; lines starting with '#' are
    skipped.
    """
    args: list[str] = []
    with open(path, "r", encoding="utf-8-sig") as f:
        for line in f:
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            args.extend(shlex.split(stripped))
    return args


def expand_response_files(
    args: Iterable[str], cwd: Optional[Union[str, Path]] = None
) -> list[str]:
    """Replace every ``@path`` argument with the arguments stored in that file.

    Relative paths are resolved against ``cwd`` (the working directory when
    omitted). A bare ``@`` is kept as is.

    Raises:
        OSError: If a referenced response file cannot be read
    """
    base = Path(cwd) if cwd is not None else Path.cwd()
    expanded: list[str] = []
    for arg in args:
        if arg.startswith(RESPONSE_FILE_PREFIX) and len(arg) > 1:
            path = base / arg[len(RESPONSE_FILE_PREFIX):]
            stored = read_response_file(path)
            logger.debug(f"Expanded {arg} into {len(stored)} arguments")
            expanded.extend(stored)
        else:
            expanded.append(arg)
    return expanded
