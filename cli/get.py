"""
Get Subcommand Module

Prints a single setting value after loading the nearest .env file.
"""

import sys

import click

from envsettings import HostContext, initialize
from envsettings.errors import ConfigurationFileError
from .shared_options import env_file_option, start_dir_option


@click.command(help="Print the value of one setting")
@click.argument('key')
@click.option('--default', '-d', 'default', default=None, help='Value to print when the key is unset')
@start_dir_option()
@env_file_option()
def get(key, default, start_dir, env_file):
    """Print KEY's value; exits 1 when it is unset and no default is given."""
    context = HostContext(start_dir=start_dir, env_file=env_file)
    try:
        initialize(context)
    except ConfigurationFileError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    value = context.get(key, default)
    if value is None:
        click.echo(f"{key} is not set", err=True)
        sys.exit(1)

    click.echo(value)
