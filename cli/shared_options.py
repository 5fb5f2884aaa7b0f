"""
Shared CLI Option Decorators

This module provides reusable Click decorators for common CLI options,
ensuring consistency across subcommands.
"""

import click


def start_dir_option(help=None):
    """Decorator for the .env search start directory."""
    def decorator(f):
        return click.option(
            '--start', '-s',
            'start_dir',
            type=click.Path(exists=True, file_okay=False),
            default=None,
            help=help or 'Directory to start searching for .env from (default: current directory)'
        )(f)
    return decorator


def env_file_option(help=None):
    """Decorator for an explicit .env file path."""
    def decorator(f):
        return click.option(
            '--env-file', '-f',
            type=click.Path(dir_okay=False),
            default=None,
            help=help or 'Load this file instead of searching for the nearest .env'
        )(f)
    return decorator


def json_option(help=None):
    """Decorator for JSON output."""
    def decorator(f):
        return click.option(
            '--json', 'as_json',
            is_flag=True,
            help=help or 'Print output as JSON'
        )(f)
    return decorator
