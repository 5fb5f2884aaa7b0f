"""
Show Subcommand Module

Loads settings from the nearest .env file and prints them with secrets
masked.
"""

import sys

import click

from envsettings import HostContext, initialize
from envsettings.errors import ConfigurationFileError
from envsettings.pretty_printer import SettingsPrettyPrinter
from .shared_options import env_file_option, json_option, start_dir_option


@click.command(help="Load and display settings (secrets masked)")
@start_dir_option()
@env_file_option()
@click.option('--namespace', '-n', default=None, help='Show a single namespace group')
@click.option('--all', 'include_all', is_flag=True, help='Show every key, not only recognized ones')
@click.option('--show-secrets', is_flag=True, help='Do not mask sensitive values')
@json_option()
def show(start_dir, env_file, namespace, include_all, show_secrets, as_json):
    """Display loaded settings.

    Examples:
        # Recognized keys from the nearest .env
        agent-settings show

        # One namespace as JSON
        agent-settings show --namespace discord --json
    """
    try:
        settings = initialize(HostContext(start_dir=start_dir, env_file=env_file))
    except ConfigurationFileError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    printer = SettingsPrettyPrinter(show_secrets=show_secrets)

    if namespace is not None:
        if namespace not in settings.namespaces:
            click.echo(f"Error: namespace '{namespace}' not found", err=True)
            sys.exit(1)
        group = settings.namespace(namespace)
        if as_json:
            click.echo(printer.format_namespace_json(group))
        else:
            click.echo(printer.format_namespace(namespace, group))
        return

    if as_json:
        click.echo(printer.format_json(settings, include_all))
    else:
        click.echo(printer.format_text(settings, include_all))
