"""
Execution contexts for the settings loader.

The loader runs in one of two contexts, chosen explicitly by the caller:

- HostContext: file system and process environment are available. Loading
  discovers the nearest .env file and merges it into the environment.
- SandboxedContext: no file system access. Settings are injected wholesale
  through configure() and served from memory.

Both implement ExecutionContext so callers can swap them freely.
"""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Mapping, MutableMapping, Optional, Union

from dotenv import dotenv_values

from .discovery import ENV_FILENAME, find_nearest_env_file
from .errors import ConfigurationFileError
from .namespaces import legacy_namespace_entries
from .schema import Settings, parse_bool

logger = logging.getLogger(__name__)


class ExecutionContext(ABC):
    """Capability interface for loading and reading settings."""

    can_access_filesystem: bool = False

    @abstractmethod
    def load(self) -> Settings:
        """Run the full load sequence and return the resulting settings."""
        pass

    @abstractmethod
    def configure(self, settings: Mapping[str, Optional[str]]) -> None:
        """Inject settings into this context."""
        pass

    @abstractmethod
    def _lookup(self) -> Mapping[str, Optional[str]]:
        """Live mapping that get() and has() read from."""
        pass

    def find_env_file(self, start_dir: Optional[Union[str, Path]] = None) -> Optional[Path]:
        return None

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Look up a setting.

        An empty value is treated as unset and falls back to default.

        Args:
            key: Setting name
            default: Value returned when the key is absent or empty

        Returns:
            The setting value, default, or None
        """
        return self._lookup().get(key) or default

    def has(self, key: str) -> bool:
        """Check whether a setting exists (even with an empty value)."""
        return key in self._lookup()

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Read a boolean toggle (1/true/yes/on, 0/false/no/off)."""
        parsed = parse_bool(self.get(key))
        return default if parsed is None else parsed

    def get_int(self, key: str, default: Optional[int] = None) -> Optional[int]:
        """Read an integer setting, returning default if absent or unparseable."""
        value = self.get(key)
        if value is None:
            return default
        try:
            return int(value.strip())
        except ValueError:
            logger.warning(f"Setting {key}={value!r} is not an integer, using default {default!r}")
            return default


class HostContext(ExecutionContext):
    """
    Context with file system and process environment access.

    Args:
        environ: Environment mapping to load into (default: os.environ)
        start_dir: Directory to start the .env search from (default: cwd at load time)
        override: Let .env values replace values already in the environment
        env_file: Load this file instead of discovering the nearest .env
        export_namespaced: Also write ``__namespaced_<ns>`` JSON strings into
            the environment for consumers that only read flat keys
    """

    can_access_filesystem = True

    def __init__(self,
                 environ: Optional[MutableMapping[str, str]] = None,
                 start_dir: Optional[Union[str, Path]] = None,
                 override: bool = False,
                 env_file: Optional[Union[str, Path]] = None,
                 export_namespaced: bool = False):
        self.environ = os.environ if environ is None else environ
        self.start_dir = start_dir
        self.override = override
        self.env_file = env_file
        self.export_namespaced = export_namespaced

    def find_env_file(self, start_dir: Optional[Union[str, Path]] = None) -> Optional[Path]:
        return find_nearest_env_file(start_dir if start_dir is not None else self.start_dir)

    def load(self) -> Settings:
        """
        Load the nearest .env file into the environment.

        A missing file is not an error; the ambient environment is used as-is.
        Lines the dotenv parser cannot read are skipped.

        Returns:
            Settings snapshot of the merged environment

        Raises:
            ConfigurationFileError: If env_file was given and cannot be read
        """
        if self.env_file is not None:
            env_path = Path(self.env_file)
            if not env_path.is_file():
                raise ConfigurationFileError(
                    f"Configuration file not found: {env_path}", path=str(env_path)
                )
        else:
            env_path = self.find_env_file()

        if env_path is not None:
            self._merge_file(env_path)
            logger.info(f"Loaded {ENV_FILENAME} file from: {env_path}")
        else:
            logger.debug(f"No {ENV_FILENAME} file found, using process environment only")

        settings = Settings(self.environ, source=env_path)

        if self.export_namespaced and settings.namespaces:
            self.environ.update(legacy_namespace_entries(settings.namespaces))
            settings = Settings(self.environ, source=env_path)

        return settings

    def configure(self, settings: Mapping[str, Optional[str]]) -> None:
        for key, value in settings.items():
            if value is None:
                self.environ.pop(key, None)
            else:
                self.environ[key] = value

    def _lookup(self) -> Mapping[str, Optional[str]]:
        return self.environ

    def _merge_file(self, env_path: Path) -> None:
        try:
            values = dotenv_values(env_path)
        except OSError as e:
            raise ConfigurationFileError(
                f"Failed to read configuration file {env_path}: {e}", path=str(env_path)
            ) from e

        for key, value in values.items():
            # dotenv yields None for bare keys without '='
            if value is None:
                continue
            if self.override or key not in self.environ:
                self.environ[key] = value


class SandboxedContext(ExecutionContext):
    """
    Context without file system access.

    Settings come only from configure(); no discovery is attempted.
    """

    can_access_filesystem = False

    def __init__(self, settings: Optional[Mapping[str, Optional[str]]] = None):
        self._settings: Dict[str, Optional[str]] = dict(settings or {})

    def load(self) -> Settings:
        return Settings(self._settings)

    def configure(self, settings: Mapping[str, Optional[str]]) -> None:
        self._settings = dict(settings)
        logger.debug(f"Configured {len(self._settings)} settings in sandboxed context")

    def _lookup(self) -> Mapping[str, Optional[str]]:
        return self._settings
