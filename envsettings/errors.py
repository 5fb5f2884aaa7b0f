"""
Settings Error Classes

This module defines the exception hierarchy for the settings loader.
All settings-related errors inherit from SettingsError base class, enabling
consistent error handling by callers.

Error Hierarchy:
    SettingsError (base)
    ├── SettingsNotInitializedError (lookup before initialize())
    └── ConfigurationFileError (explicitly requested file unreadable)

A missing .env file found during discovery is never an error; loading
continues with the ambient process environment.

Usage:
    >>> from envsettings.errors import SettingsNotInitializedError
    >>>
    >>> try:
    >>>     settings = get_settings()
    >>> except SettingsNotInitializedError:
    >>>     settings = initialize()
"""


class SettingsError(Exception):
    """Base exception for all settings loader errors."""
    pass


class SettingsNotInitializedError(SettingsError):
    """Raised when the process-wide settings are read before initialize().

    The loader never populates itself at import time. Call
    ``envsettings.initialize()`` once at start-up before using the
    module-level lookups.
    """

    def __init__(self, message: str = None):
        super().__init__(
            message
            or "Settings have not been initialized. Call envsettings.initialize() first."
        )


class ConfigurationFileError(SettingsError):
    """Raised when an explicitly requested configuration file cannot be read.

    Attributes:
        path: Path of the file that failed to load
    """

    def __init__(self, message: str, path: str = None):
        super().__init__(message)
        self.path = path
