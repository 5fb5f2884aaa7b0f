"""
Process-wide settings lifecycle.

Nothing is loaded at import time. Call initialize() once at start-up with the
execution context the process runs in; reset() forgets it again (tests,
teardown).

Usage:
    >>> from envsettings import initialize, get_setting
    >>> settings = initialize()
    >>> settings.namespaces.get("openai", {})
    >>> get_setting("OPENAI_API_KEY")
"""

import logging
from typing import Mapping, Optional

from .context import ExecutionContext, HostContext, SandboxedContext
from .errors import SettingsNotInitializedError
from .schema import Settings, embedding_settings
from .utils.logging_config import logging_config

logger = logging.getLogger(__name__)

_context: Optional[ExecutionContext] = None
_settings: Optional[Settings] = None


def initialize(context: Optional[ExecutionContext] = None) -> Settings:
    """
    Load settings and make them the process-wide settings.

    Calling again reloads; with an unchanged file system the result is equal
    to the previous one.

    Args:
        context: Execution context to load through (default: HostContext())

    Returns:
        The loaded settings
    """
    global _context, _settings

    if context is None:
        context = HostContext()

    settings = context.load()
    _context = context
    _settings = settings

    logger.debug(
        f"Settings initialized: {len(settings)} keys, "
        f"namespaces={sorted(settings.namespaces)}, source={settings.source}"
    )
    logger.debug(f"Embedding settings: {embedding_settings(settings)}")
    log_settings(settings)
    return settings


def configure_settings(settings: Mapping[str, Optional[str]]) -> Settings:
    """
    Inject settings into the active context and reload.

    When nothing has been initialized yet a SandboxedContext is created, so
    this works where no file system is reachable.

    Args:
        settings: Mapping to inject (shallow-copied)

    Returns:
        The reloaded settings
    """
    context = _context if _context is not None else SandboxedContext()
    context.configure(settings)
    return initialize(context)


def get_context() -> ExecutionContext:
    if _context is None:
        raise SettingsNotInitializedError()
    return _context


def get_settings() -> Settings:
    """Settings from the most recent initialize() or configure_settings()."""
    if _settings is None:
        raise SettingsNotInitializedError()
    return _settings


def get_setting(key: str, default: Optional[str] = None) -> Optional[str]:
    """Live lookup through the active context; empty values fall back to default."""
    return get_context().get(key, default)


def has_setting(key: str) -> bool:
    return get_context().has(key)


def is_initialized() -> bool:
    return _settings is not None


def reset() -> None:
    """Forget the active context and settings."""
    global _context, _settings
    _context = None
    _settings = None


def log_settings(settings: Optional[Settings] = None) -> None:
    """Log settings at debug level with sensitive values masked."""
    logging_config.log_configuration_details(dict(settings if settings is not None else get_settings()))
