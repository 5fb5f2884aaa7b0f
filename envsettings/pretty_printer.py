"""
Settings pretty printer.

Renders loaded settings for display with sensitive values masked, either as
aligned text grouped by section or as JSON.
"""

import json
from typing import Dict, List, Mapping, Optional

from .environment import EnvironmentVariables
from .schema import Settings
from .utils.logging_config import mask_value


class SettingsPrettyPrinter:
    """Formats settings for terminal output."""

    def __init__(self, show_secrets: bool = False):
        self.indent = "  "
        self.show_secrets = show_secrets

    def display(self, key: str, value: Optional[str]) -> Optional[str]:
        if self.show_secrets:
            return value
        return mask_value(key, value)

    def select(self, settings: Mapping[str, Optional[str]], include_all: bool = False) -> Dict[str, Optional[str]]:
        """
        Pick the keys to display.

        Args:
            settings: Flat settings
            include_all: Show every key instead of only recognized ones

        Returns:
            Key to display value, sorted by key
        """
        if include_all:
            keys = sorted(settings)
        else:
            keys = [k for k in EnvironmentVariables.get_all_variables() if k in settings]
        return {key: self.display(key, settings[key]) for key in keys}

    def format_text(self, settings: Settings, include_all: bool = False) -> str:
        lines: List[str] = []
        lines.append(f"Source: {settings.source or '(no .env file found)'}")
        lines.append("")

        selected = self.select(settings, include_all)
        lines.append("Settings:")
        if selected:
            width = max(len(key) for key in selected)
            for key, value in selected.items():
                lines.append(f"{self.indent}{key.ljust(width)} = {'' if value is None else value}")
        else:
            lines.append(f"{self.indent}(none)")

        if settings.namespaces:
            lines.append("")
            lines.append("Namespaces:")
            for name in sorted(settings.namespaces):
                lines.append(f"{self.indent}{name} ({len(settings.namespaces[name])} keys)")

        return "\n".join(lines)

    def format_namespace(self, name: str, group: Mapping[str, str]) -> str:
        lines = [f"[{name}]"]
        for sub_key in sorted(group):
            lines.append(f"{self.indent}{sub_key} = {self.display(sub_key, group[sub_key])}")
        return "\n".join(lines)

    def format_namespace_json(self, group: Mapping[str, str]) -> str:
        return json.dumps({k: self.display(k, v) for k, v in group.items()}, indent=2, sort_keys=True)

    def format_json(self, settings: Settings, include_all: bool = False) -> str:
        payload = {
            "source": str(settings.source) if settings.source else None,
            "settings": self.select(settings, include_all),
            "namespaces": {
                name: {sub: self.display(sub, value) for sub, value in group.items()}
                for name, group in settings.namespaces.items()
            },
        }
        return json.dumps(payload, indent=2, sort_keys=True)
