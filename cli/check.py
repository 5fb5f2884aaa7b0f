"""
Check Subcommand Module

Gives advisory feedback on the loaded settings: which providers have
credentials and which values look like mistakes.
"""

import sys

import click

from envsettings import HostContext, initialize, provider_settings
from envsettings.environment import EnvironmentVariables
from envsettings.errors import ConfigurationFileError
from envsettings.schema import Provider
from .shared_options import env_file_option, start_dir_option


@click.command(help="Check settings for likely mistakes")
@start_dir_option()
@env_file_option()
@click.option('--instructions', is_flag=True, help='Print .env setup instructions and exit')
def check(start_dir, env_file, instructions):
    """Report configured providers, warnings and errors.

    Exits with status 1 when any error is found. Warnings never fail.
    """
    if instructions:
        click.echo(EnvironmentVariables.get_setup_instructions())
        return

    try:
        settings = initialize(HostContext(start_dir=start_dir, env_file=env_file))
    except ConfigurationFileError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Source: {settings.source or '(no .env file found)'}")
    click.echo("Providers:")
    for provider in Provider:
        view = provider_settings(settings, provider.value)
        status = "configured" if view.is_configured else "not configured"
        click.echo(f"  {provider.value}: {status}")

    warnings, errors = EnvironmentVariables.validate_environment_setup(settings)

    for warning in warnings:
        click.echo(f"⚠ {warning}")
    for error in errors:
        click.echo(f"❌ {error}", err=True)

    if errors:
        sys.exit(1)

    click.echo("✅ No errors found")
