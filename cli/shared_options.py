"""
Shared CLI Option Decorators

This module provides reusable Click decorators for the bundle options,
ensuring consistent names, short flags and defaults.
"""

import click


def language_option(help=None):
    """Decorator for the required, repeatable language option."""
    def decorator(f):
        return click.option(
            '--language', '-l',
            'languages',
            required=True,
            multiple=True,
            help=help or 'Languages to include'
        )(f)
    return decorator


def output_option(help=None):
    """Decorator for the required output file option."""
    def decorator(f):
        return click.option(
            '--output', '-o',
            required=True,
            help=help or 'Output file path'
        )(f)
    return decorator


def note_option(help=None):
    """Decorator for the origin-comment flag."""
    def decorator(f):
        return click.option(
            '--note', '-n',
            is_flag=True,
            default=False,
            help=help or 'Annotate files with their origin'
        )(f)
    return decorator


def sort_option(help=None):
    """Decorator for the sort order option.

    Left as free text: any value other than 'type' sorts by name.
    """
    def decorator(f):
        return click.option(
            '--sort', '-s',
            default='name',
            show_default=True,
            help=help or 'Sort order'
        )(f)
    return decorator


def remove_empty_lines_option(help=None):
    """Decorator for the empty-line removal flag."""
    def decorator(f):
        return click.option(
            '--remove-empty-lines', '-r',
            is_flag=True,
            default=False,
            help=help or 'Remove empty lines'
        )(f)
    return decorator


def author_option(help=None):
    """Decorator for the author header option."""
    def decorator(f):
        return click.option(
            '--author', '-a',
            default=None,
            help=help or 'Author name'
        )(f)
    return decorator


def root_option(help=None):
    """Decorator for the root directory option."""
    def decorator(f):
        return click.option(
            '--root',
            default='.',
            type=click.Path(file_okay=False),
            help=help or 'Root directory'
        )(f)
    return decorator


def log_level_option(help=None):
    """Decorator for logging level options."""
    def decorator(f):
        return click.option(
            '--log-level',
            default='WARNING',
            type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
            help=help or 'Logging level'
        )(f)
    return decorator


def log_file_option(help=None):
    """Decorator for the optional log file."""
    def decorator(f):
        return click.option(
            '--log-file',
            default=None,
            type=click.Path(dir_okay=False),
            help=help or 'Log file path'
        )(f)
    return decorator
