"""
Create-RSP Subcommand Module

Interactively asks for the bundle options and saves them as a single
``bundle ...`` command line in ``bundle.rsp`` in the working directory.
Answers are taken as typed; nothing is validated here.
"""

import logging
import os
import sys

import click

from bundler.response_file import (
    ResponseAnswers,
    build_response_command,
    write_response_file,
    RESPONSE_FILE_NAME,
)
from .help_texts import (
    ExitCodes,
    CREATE_RSP_HELP,
    PROMPT_LANGUAGES,
    PROMPT_OUTPUT,
    PROMPT_NOTE,
    PROMPT_SORT,
    PROMPT_REMOVE_EMPTY_LINES,
    PROMPT_AUTHOR,
    RESPONSE_FILE_CREATED,
    RESPONSE_FILE_ERROR,
)


logger = logging.getLogger(__name__)


def _ask(message: str) -> str:
    return click.prompt(message, default="", show_default=False)


@click.command(name="create-rsp", help=CREATE_RSP_HELP)
def create_rsp():
    """Create a response file for the bundle command."""
    answers = ResponseAnswers(
        languages=_ask(PROMPT_LANGUAGES),
        output=_ask(PROMPT_OUTPUT),
        note=_ask(PROMPT_NOTE),
        sort=_ask(PROMPT_SORT),
        remove_empty_lines=_ask(PROMPT_REMOVE_EMPTY_LINES),
        author=_ask(PROMPT_AUTHOR),
    )

    content = build_response_command(answers)
    logger.debug(f"Response command: {content}")

    try:
        write_response_file(os.getcwd(), content)
    except OSError as e:
        logger.error(f"Failed to write {RESPONSE_FILE_NAME}: {e}")
        click.echo(RESPONSE_FILE_ERROR.format(error=e))
        sys.exit(ExitCodes.FILE_ACCESS_ERROR)

    click.echo(RESPONSE_FILE_CREATED.format(path=RESPONSE_FILE_NAME))
