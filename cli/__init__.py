"""
CLI Package for Code Bundler

This package provides a modular CLI architecture using Click groups and subcommands.
Each subcommand is implemented in its own module for better maintainability and testing.

The main entry point is the main() function which creates a Click group and registers
all available subcommands. The cli() function serves as the console script entry point
for setup.py.
"""

import click

from bundler import __version__
from bundler.response_file import expand_response_files
from bundler.utils.logging_config import configure_logging
from .bundle import bundle
from .create_rsp import create_rsp
from .shared_options import log_level_option, log_file_option
from .help_texts import (
    MAIN_HELP,
    LOG_LEVEL_HELP,
    LOG_FILE_HELP,
    RESPONSE_FILE_READ_ERROR,
)


class ResponseFileGroup(click.Group):
    """Click group that expands ``@file`` arguments before parsing."""

    def parse_args(self, ctx, args):
        expanded = []
        for arg in args:
            try:
                expanded.extend(expand_response_files([arg]))
            except (OSError, ValueError) as e:
                raise click.UsageError(
                    RESPONSE_FILE_READ_ERROR.format(arg=arg, error=e), ctx=ctx
                ) from e
        return super().parse_args(ctx, expanded)


@click.group(cls=ResponseFileGroup, help=MAIN_HELP)
@click.version_option(version=__version__, prog_name='code-bundler')
@log_level_option(help=LOG_LEVEL_HELP)
@log_file_option(help=LOG_FILE_HELP)
def main(log_level, log_file):
    """Code Bundler CLI - concatenate source files into a single bundle.

    Arguments of the form @FILE are replaced by the command line stored in
    FILE, e.g. the bundle.rsp written by create-rsp.
    """
    configure_logging(level=log_level.lower(), log_file=log_file)


# Register subcommands
main.add_command(bundle)
main.add_command(create_rsp)


# Entry point for setup.py console script
def cli():
    """Console script entry point.

    This function is called when the code-bundler command is executed
    from the command line after installation via pip.
    """
    main()
