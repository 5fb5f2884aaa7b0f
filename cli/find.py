"""
Find Subcommand Module

Prints the path of the nearest .env file.
"""

import sys

import click

from envsettings.discovery import ENV_FILENAME, find_nearest_env_file, iter_search_dirs
from .shared_options import start_dir_option


@click.command(help=f"Print the path of the nearest {ENV_FILENAME} file")
@start_dir_option()
@click.option('--verbose', '-v', is_flag=True, help='List every directory searched')
def find(start_dir, verbose):
    """Search the start directory and its parents for a .env file.

    Exits with status 1 when no file exists up to and including the root.
    """
    if verbose:
        for directory in iter_search_dirs(start_dir):
            click.echo(f"searching {directory}", err=True)

    env_path = find_nearest_env_file(start_dir)
    if env_path is None:
        click.echo(f"No {ENV_FILENAME} file found", err=True)
        sys.exit(1)

    click.echo(str(env_path))
