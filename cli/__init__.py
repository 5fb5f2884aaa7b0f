"""
CLI Package for Agent Settings

This package provides a modular CLI architecture using Click groups and subcommands.
Each subcommand is implemented in its own module for better maintainability and testing.

The main entry point is the main() function which creates a Click group and registers
all available subcommands. The cli() function serves as the console script entry point
for setup.py.
"""

import os

import click

from envsettings import __version__
from envsettings.environment import EnvironmentVariables
from envsettings.utils.logging_config import configure_logging
from .check import check
from .find import find
from .get import get
from .show import show


@click.group()
@click.version_option(version=__version__, prog_name='agent-settings')
@click.option(
    '--log-level',
    type=click.Choice(['debug', 'info', 'warning', 'error'], case_sensitive=False),
    default=None,
    help=f'Logging level (default: ${EnvironmentVariables.LOG_LEVEL} or warning)',
)
@click.option('--log-file', type=click.Path(dir_okay=False), default=None, help='Also write logs to this file')
def main(log_level, log_file):
    """Agent Settings CLI - Discover, load and inspect .env settings.

    Settings are read from the nearest .env file above the current directory
    and merged into the process environment. Keys such as ``discord.token``
    are grouped into namespaces.
    """
    level = log_level or os.environ.get(EnvironmentVariables.LOG_LEVEL, 'warning')
    configure_logging(level=level.lower(), log_file=log_file, force=True)


# Register subcommands
main.add_command(find)
main.add_command(show)
main.add_command(get)
main.add_command(check)


# Entry point for setup.py console script
def cli():
    """Console script entry point.

    This function is called when the agent-settings command is executed
    from the command line after installation via pip.
    """
    main()
