"""
Settings loader for .env-style configuration.

Discovers the nearest .env file, merges it into the process environment,
groups dotted keys into namespaces and offers lookups. Loading is explicit:

    >>> import envsettings
    >>> settings = envsettings.initialize()
    >>> envsettings.get_setting("LARGE_OPENAI_MODEL", "gpt-4o")

Pass a SandboxedContext to initialize() where no file system is available.
"""

from .context import ExecutionContext, HostContext, SandboxedContext
from .discovery import ENV_FILENAME, find_nearest_env_file
from .errors import ConfigurationFileError, SettingsError, SettingsNotInitializedError
from .loader import (
    configure_settings,
    get_context,
    get_setting,
    get_settings,
    has_setting,
    initialize,
    is_initialized,
    reset,
)
from .namespaces import NamespacedSettings, parse_namespaced_settings
from .schema import Settings, embedding_settings, provider_settings

__version__ = "0.2.0"

__all__ = [
    "ENV_FILENAME",
    "ConfigurationFileError",
    "ExecutionContext",
    "HostContext",
    "NamespacedSettings",
    "SandboxedContext",
    "Settings",
    "SettingsError",
    "SettingsNotInitializedError",
    "configure_settings",
    "embedding_settings",
    "find_nearest_env_file",
    "get_context",
    "get_setting",
    "get_settings",
    "has_setting",
    "initialize",
    "is_initialized",
    "parse_namespaced_settings",
    "provider_settings",
    "reset",
]
