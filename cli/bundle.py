"""
Bundle Subcommand Module

This module implements the bundle subcommand for the Code Bundler CLI.
It resolves the options, collects matching source files below the root
directory and writes them into one bundle file.
"""

import logging
import sys

import click

from bundler.config import resolve_config
from bundler.errors import (
    BundleError,
    BundleErrorInfo,
    BundleIOError,
    InvalidArgumentError,
    NoFilesFoundError,
)
from bundler.writer import bundle as write_bundle_for_config
from .shared_options import (
    language_option,
    output_option,
    note_option,
    sort_option,
    remove_empty_lines_option,
    author_option,
    root_option,
)
from .help_texts import (
    ExitCodes,
    BUNDLE_HELP,
    BUNDLE_LANGUAGE_HELP,
    BUNDLE_OUTPUT_HELP,
    BUNDLE_NOTE_HELP,
    BUNDLE_SORT_HELP,
    BUNDLE_REMOVE_EMPTY_LINES_HELP,
    BUNDLE_AUTHOR_HELP,
    BUNDLE_ROOT_HELP,
    BUNDLE_CREATED,
    BUNDLE_WRITE_ERROR,
    HINT,
)


logger = logging.getLogger(__name__)


@click.command(help=BUNDLE_HELP)
@language_option(help=BUNDLE_LANGUAGE_HELP)
@output_option(help=BUNDLE_OUTPUT_HELP)
@note_option(help=BUNDLE_NOTE_HELP)
@sort_option(help=BUNDLE_SORT_HELP)
@remove_empty_lines_option(help=BUNDLE_REMOVE_EMPTY_LINES_HELP)
@author_option(help=BUNDLE_AUTHOR_HELP)
@root_option(help=BUNDLE_ROOT_HELP)
def bundle(languages, output, note, sort, remove_empty_lines, author, root):
    """Bundle code files into a single file.

    Examples:
        # Every Python and JavaScript file, annotated with its origin
        code-bundler bundle -l py -l js -o bundle.txt --note

        # All supported languages grouped by extension, blank lines removed
        code-bundler bundle -l all -o bundle.txt --sort type -r

        # Replay a saved response file
        code-bundler @bundle.rsp
    """
    try:
        config = resolve_config(
            languages=languages,
            output=output,
            root=root,
            note=note,
            sort=sort,
            remove_empty_lines=remove_empty_lines,
            author=author,
        )
        result = write_bundle_for_config(config)
    except BundleError as e:
        _report_error(e)
        sys.exit(_exit_code_for(e))

    logger.info(f"Bundled {result.file_count} files ({result.line_count} lines)")
    click.echo(BUNDLE_CREATED.format(path=output))


def _report_error(error: BundleError) -> None:
    """Print a bundling error without a stack trace."""
    info = BundleErrorInfo.from_exception(error)
    logger.debug(f"{info.error_type}: {info.details}")

    if isinstance(error, BundleIOError):
        click.echo(BUNDLE_WRITE_ERROR.format(error=info.message))
    else:
        click.echo(info.message)

    if info.suggestion:
        click.echo(HINT.format(suggestion=info.suggestion))


def _exit_code_for(error: BundleError) -> int:
    if isinstance(error, InvalidArgumentError):
        return ExitCodes.INVALID_ARGUMENT
    if isinstance(error, NoFilesFoundError):
        return ExitCodes.NO_FILES_FOUND
    if isinstance(error, BundleIOError):
        return ExitCodes.FILE_ACCESS_ERROR
    return ExitCodes.GENERAL_ERROR
