"""
Argument resolution for the bundle command.

Turns raw command-line values into a validated BundleConfig, or raises
InvalidArgumentError when a required option is missing or no requested
language maps to a known extension.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from pydantic import ValidationError

from bundler.config.schema import BundleConfig, SortMode
from bundler.errors import InvalidArgumentError
from bundler.languages import normalize_language_tokens, resolve_extensions

logger = logging.getLogger(__name__)

NO_VALID_LANGUAGES = "No valid languages specified."


def resolve_config(
    languages: Optional[Iterable[str]],
    output: Optional[Union[str, Path]],
    root: Union[str, Path] = ".",
    note: bool = False,
    sort: Optional[str] = None,
    remove_empty_lines: bool = False,
    author: Optional[str] = None,
) -> BundleConfig:
    """
    Build a BundleConfig from command-line values.

    Args:
        languages: Language option values (repeated and/or comma separated)
        output: Bundle output path
        root: Directory to collect files from
        note: Whether to annotate each file with its relative path
        sort: Sort option value; anything but "type" sorts by name
        remove_empty_lines: Whether to drop blank lines
        author: Author name for the header comment

    Returns:
        Immutable BundleConfig

    Raises:
        InvalidArgumentError: If languages or output are missing, or no
            language token is recognized
    """
    tokens = normalize_language_tokens(languages)
    if not tokens:
        raise InvalidArgumentError("Option '--language' is required.", option="language")

    if output is None or not str(output).strip():
        raise InvalidArgumentError("Option '--output' is required.", option="output")

    extensions = resolve_extensions(tokens)
    if not extensions:
        logger.debug(f"No known extension for languages: {', '.join(sorted(tokens))}")
        raise InvalidArgumentError(NO_VALID_LANGUAGES, option="language")

    try:
        config = BundleConfig(
            languages=tokens,
            output=Path(output),
            root=Path(root).absolute(),
            note=note,
            sort_mode=SortMode.from_option(sort),
            remove_empty_lines=remove_empty_lines,
            author=author,
        )
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid bundle options: {e}") from e

    logger.debug(f"Resolved extensions: {', '.join(sorted(config.extensions))}")
    return config
