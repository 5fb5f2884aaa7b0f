"""
Settings data models.

This module defines the loaded settings snapshot and typed views over the
recognized (optional) configuration keys:
- Flat settings with their namespaced groups
- Per-provider credentials and model-tier overrides
- Embedding toggles
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Iterator, Mapping, Optional

from .namespaces import NamespacedSettings, parse_namespaced_settings


TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")

DEFAULT_OLLAMA_EMBEDDING_MODEL = "mxbai-embed-large"


def parse_bool(value: Optional[str]) -> Optional[bool]:
    """Parse a boolean toggle; returns None when the value is not recognized."""
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    return None


class Settings(Mapping[str, Optional[str]]):
    """
    Read-only snapshot of flat settings taken at load time.

    Behaves as a mapping of key to value and exposes the namespaced groups
    derived from dotted keys as a first-class attribute.

    Attributes:
        namespaces: Namespace to sub-key/value mapping
        source: Path of the .env file that was read, if any
    """

    def __init__(self, values: Mapping[str, Optional[str]], source: Optional[Path] = None):
        self._values: Dict[str, Optional[str]] = dict(values)
        self.namespaces: NamespacedSettings = parse_namespaced_settings(self._values)
        self.source = source

    def __getitem__(self, key: str) -> Optional[str]:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Settings({len(self)} keys, namespaces={sorted(self.namespaces)}, source={self.source})"

    def namespace(self, name: str) -> Dict[str, str]:
        """Sub-key/value pairs of one namespace (empty if unknown)."""
        return dict(self.namespaces.get(name, {}))


class Provider(Enum):
    """Model providers with recognized configuration keys."""
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GOOGLE = "google"
    MISTRAL = "mistral"
    BEDROCK = "bedrock"
    PORTKEY = "portkey"


@dataclass
class ProviderSettings:
    """Credentials, endpoint and model-tier overrides for one provider."""
    name: str
    api_key: Optional[str] = None
    api_url: Optional[str] = None
    small_model: Optional[str] = None
    medium_model: Optional[str] = None
    large_model: Optional[str] = None
    embedding_model: Optional[str] = None
    image_model: Optional[str] = None
    region: Optional[str] = None
    secret_key: Optional[str] = None

    @property
    def is_configured(self) -> bool:
        """True when a credential is present for the provider."""
        return bool(self.api_key)

    @property
    def has_model_overrides(self) -> bool:
        return any((
            self.small_model,
            self.medium_model,
            self.large_model,
            self.embedding_model,
            self.image_model,
        ))


@dataclass
class EmbeddingSettings:
    """Embedding backend toggles."""
    use_openai_embedding: bool = False
    use_ollama_embedding: bool = False
    ollama_embedding_model: str = DEFAULT_OLLAMA_EMBEDDING_MODEL


def provider_settings(settings: Mapping[str, Optional[str]], provider: str) -> ProviderSettings:
    """
    Build the typed view of a provider's recognized keys.

    Values are copied as-is; nothing is validated.

    Args:
        settings: Flat settings mapping
        provider: Provider name (see Provider)

    Returns:
        ProviderSettings for the provider

    Raises:
        ValueError: If provider is not a recognized provider name
    """
    try:
        name = Provider(provider.lower()).value
    except ValueError:
        valid = ", ".join(p.value for p in Provider)
        raise ValueError(f"Unknown provider '{provider}'. Valid options: {valid}")

    def value(key: str) -> Optional[str]:
        return settings.get(key) or None

    upper = name.upper()
    if name == Provider.BEDROCK.value:
        return ProviderSettings(
            name=name,
            api_key=value("BEDROCK_ACCESS_KEY"),
            secret_key=value("BEDROCK_SECRET_KEY"),
            region=value("BEDROCK_REGION"),
        )

    return ProviderSettings(
        name=name,
        api_key=value(f"{upper}_API_KEY"),
        api_url=value(f"{upper}_API_URL"),
        small_model=value(f"SMALL_{upper}_MODEL"),
        medium_model=value(f"MEDIUM_{upper}_MODEL"),
        large_model=value(f"LARGE_{upper}_MODEL"),
        embedding_model=value(f"EMBEDDING_{upper}_MODEL"),
        image_model=value(f"IMAGE_{upper}_MODEL"),
    )


def embedding_settings(settings: Mapping[str, Optional[str]]) -> EmbeddingSettings:
    """Build the embedding toggles view; unrecognized toggles read as False."""
    return EmbeddingSettings(
        use_openai_embedding=bool(parse_bool(settings.get("USE_OPENAI_EMBEDDING"))),
        use_ollama_embedding=bool(parse_bool(settings.get("USE_OLLAMA_EMBEDDING"))),
        ollama_embedding_model=settings.get("OLLAMA_EMBEDDING_MODEL") or DEFAULT_OLLAMA_EMBEDDING_MODEL,
    )
