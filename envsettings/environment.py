"""
Recognized environment variables.

This module centralizes the names of the configuration keys the settings
loader documents. None of them is required and the loader never rejects a
value; validate_environment_setup() only gives advisory feedback.
"""

import os
from typing import Dict, List, Mapping, Optional, Tuple

from .schema import Provider, parse_bool, provider_settings


class EnvironmentVariables:
    """Centralized environment variable definitions and utilities."""

    # Loader configuration
    LOG_LEVEL = "AGENT_SETTINGS_LOG_LEVEL"

    # HTTP gate
    API_KEY = "API_KEY"

    # Model provider credentials and endpoints
    OPENAI_API_KEY = "OPENAI_API_KEY"
    OPENAI_API_URL = "OPENAI_API_URL"
    ANTHROPIC_API_KEY = "ANTHROPIC_API_KEY"
    ANTHROPIC_API_URL = "ANTHROPIC_API_URL"
    GOOGLE_API_KEY = "GOOGLE_API_KEY"
    MISTRAL_API_KEY = "MISTRAL_API_KEY"
    BEDROCK_REGION = "BEDROCK_REGION"
    BEDROCK_ACCESS_KEY = "BEDROCK_ACCESS_KEY"
    BEDROCK_SECRET_KEY = "BEDROCK_SECRET_KEY"
    PORTKEY_API_KEY = "PORTKEY_API_KEY"
    PORTKEY_API_URL = "PORTKEY_API_URL"

    # OpenAI models
    SMALL_OPENAI_MODEL = "SMALL_OPENAI_MODEL"
    MEDIUM_OPENAI_MODEL = "MEDIUM_OPENAI_MODEL"
    LARGE_OPENAI_MODEL = "LARGE_OPENAI_MODEL"
    EMBEDDING_OPENAI_MODEL = "EMBEDDING_OPENAI_MODEL"
    IMAGE_OPENAI_MODEL = "IMAGE_OPENAI_MODEL"

    # Anthropic models
    SMALL_ANTHROPIC_MODEL = "SMALL_ANTHROPIC_MODEL"
    MEDIUM_ANTHROPIC_MODEL = "MEDIUM_ANTHROPIC_MODEL"
    LARGE_ANTHROPIC_MODEL = "LARGE_ANTHROPIC_MODEL"

    # Mistral models
    SMALL_MISTRAL_MODEL = "SMALL_MISTRAL_MODEL"
    MEDIUM_MISTRAL_MODEL = "MEDIUM_MISTRAL_MODEL"
    LARGE_MISTRAL_MODEL = "LARGE_MISTRAL_MODEL"

    # PortKey models
    SMALL_PORTKEY_MODEL = "SMALL_PORTKEY_MODEL"
    MEDIUM_PORTKEY_MODEL = "MEDIUM_PORTKEY_MODEL"
    LARGE_PORTKEY_MODEL = "LARGE_PORTKEY_MODEL"
    EMBEDDING_PORTKEY_MODEL = "EMBEDDING_PORTKEY_MODEL"

    # Embeddings
    USE_OPENAI_EMBEDDING = "USE_OPENAI_EMBEDDING"
    USE_OLLAMA_EMBEDDING = "USE_OLLAMA_EMBEDDING"
    OLLAMA_EMBEDDING_MODEL = "OLLAMA_EMBEDDING_MODEL"

    # Other
    SYSTEM_PROMPT = "SYSTEM_PROMPT"

    SENSITIVE_MARKERS = ("KEY", "SECRET", "PASSWORD", "TOKEN")

    @classmethod
    def get_all_variables(cls) -> List[str]:
        """Get list of all recognized environment variables."""
        return list(cls.get_variable_documentation().keys())

    @classmethod
    def get_variable_documentation(cls) -> Dict[str, str]:
        """Get documentation for all recognized environment variables."""
        docs = {
            cls.LOG_LEVEL: "Logging level for the loader and CLI (debug, info, warning, error)",
            cls.API_KEY: "Expected value of the x-api-key header on the HTTP API",
            cls.OPENAI_API_KEY: "OpenAI API key",
            cls.OPENAI_API_URL: "OpenAI API base URL override",
            cls.ANTHROPIC_API_KEY: "Anthropic API key",
            cls.ANTHROPIC_API_URL: "Anthropic API base URL override",
            cls.GOOGLE_API_KEY: "Google AI API key",
            cls.MISTRAL_API_KEY: "Mistral API key",
            cls.BEDROCK_REGION: "AWS region for Bedrock",
            cls.BEDROCK_ACCESS_KEY: "AWS access key ID for Bedrock",
            cls.BEDROCK_SECRET_KEY: "AWS secret access key for Bedrock",
            cls.PORTKEY_API_KEY: "PortKey gateway API key",
            cls.PORTKEY_API_URL: "PortKey gateway base URL override",
            cls.SYSTEM_PROMPT: "System prompt override",
            cls.USE_OPENAI_EMBEDDING: "Use OpenAI embeddings (true/false)",
            cls.USE_OLLAMA_EMBEDDING: "Use Ollama embeddings (true/false)",
            cls.OLLAMA_EMBEDDING_MODEL: "Ollama embedding model (default: mxbai-embed-large)",
        }
        for provider, tiers in cls._model_tiers().items():
            for tier in tiers:
                docs[f"{tier}_{provider.upper()}_MODEL"] = (
                    f"{tier.capitalize()} model name override for {provider}"
                )
        return docs

    @staticmethod
    def _model_tiers() -> Dict[str, Tuple[str, ...]]:
        return {
            Provider.OPENAI.value: ("SMALL", "MEDIUM", "LARGE", "EMBEDDING", "IMAGE"),
            Provider.ANTHROPIC.value: ("SMALL", "MEDIUM", "LARGE"),
            Provider.MISTRAL.value: ("SMALL", "MEDIUM", "LARGE"),
            Provider.PORTKEY.value: ("SMALL", "MEDIUM", "LARGE", "EMBEDDING"),
        }

    @classmethod
    def is_sensitive(cls, key: str) -> bool:
        """Whether a key's value should be masked when displayed."""
        upper = key.upper()
        return any(marker in upper for marker in cls.SENSITIVE_MARKERS)

    @classmethod
    def validate_environment_setup(
        cls, settings: Optional[Mapping[str, Optional[str]]] = None
    ) -> Tuple[List[str], List[str]]:
        """
        Give advisory feedback on the current settings.

        Args:
            settings: Mapping to check (default: os.environ)

        Returns:
            Tuple of (warnings, errors) - warnings for likely mistakes,
            errors for values that cannot be interpreted at all
        """
        settings = os.environ if settings is None else settings
        warnings = []
        errors = []

        for toggle in (cls.USE_OPENAI_EMBEDDING, cls.USE_OLLAMA_EMBEDDING):
            value = settings.get(toggle)
            if value and parse_bool(value) is None:
                errors.append(f"Invalid {toggle}: '{value}'. "
                              f"Valid options: true, false, 1, 0, yes, no, on, off")

        if parse_bool(settings.get(cls.USE_OPENAI_EMBEDDING)) and \
                parse_bool(settings.get(cls.USE_OLLAMA_EMBEDDING)):
            warnings.append(f"Both {cls.USE_OPENAI_EMBEDDING} and {cls.USE_OLLAMA_EMBEDDING} are enabled")

        for provider in cls._model_tiers():
            view = provider_settings(settings, provider)
            if view.has_model_overrides and not view.is_configured:
                warnings.append(
                    f"Model overrides are set for '{provider}' but {provider.upper()}_API_KEY is not set"
                )

        return warnings, errors

    @classmethod
    def get_setup_instructions(cls) -> str:
        """Get setup instructions for the .env file."""
        return """
Settings are read from the nearest .env file, searching from the current
directory up to the file-system root. Values already set in the process
environment take precedence.

Example .env:
  OPENAI_API_KEY=sk-your-openai-key-here
  LARGE_OPENAI_MODEL=gpt-4o
  ANTHROPIC_API_KEY=your-anthropic-key
  API_KEY=shared-secret-for-the-http-api

Namespaced keys group related settings:
  discord.token=...
  discord.channel.id=...
"""
