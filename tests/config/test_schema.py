"""
Unit tests for the settings data models.
"""

from pathlib import Path

import pytest

from envsettings.schema import (
    DEFAULT_OLLAMA_EMBEDDING_MODEL,
    Settings,
    embedding_settings,
    parse_bool,
    provider_settings,
)


class TestSettings:

    def test_mapping_behaviour(self):
        settings = Settings({"A": "1", "ns.key": "v"}, source=Path("/tmp/.env"))

        assert settings["A"] == "1"
        assert len(settings) == 2
        assert set(settings) == {"A", "ns.key"}
        assert settings.get("MISSING") is None
        assert settings.source == Path("/tmp/.env")

    def test_is_read_only(self):
        settings = Settings({"A": "1"})

        with pytest.raises(TypeError):
            settings["A"] = "2"

    def test_copies_input(self):
        values = {"A": "1"}
        settings = Settings(values)
        values["A"] = "2"

        assert settings["A"] == "1"

    def test_equality_compares_flat_values(self):
        assert Settings({"A": "1"}) == Settings({"A": "1"}, source=Path(".env"))
        assert Settings({"A": "1"}) == {"A": "1"}
        assert Settings({"A": "1"}) != Settings({"A": "2"})

    def test_namespaces_and_accessor(self):
        settings = Settings({"openai.key": "abc", "openai.model": "gpt", "plain": "x"})

        assert settings.namespaces == {"openai": {"key": "abc", "model": "gpt"}}
        assert settings.namespace("openai") == {"key": "abc", "model": "gpt"}
        assert settings.namespace("unknown") == {}

    def test_namespace_invariant_matches_flat_keys(self):
        settings = Settings({"a.b.c": "v", "x.y": "1", "z": "2"})

        for namespace, group in settings.namespaces.items():
            for sub_key, value in group.items():
                assert settings[f"{namespace}.{sub_key}"] == value


class TestParseBool:

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", " yes ", "on"])
    def test_true(self, value):
        assert parse_bool(value) is True

    @pytest.mark.parametrize("value", ["0", "false", "No", "off"])
    def test_false(self, value):
        assert parse_bool(value) is False

    @pytest.mark.parametrize("value", [None, "", "maybe"])
    def test_unrecognized(self, value):
        assert parse_bool(value) is None


class TestProviderSettings:

    def test_openai_view(self):
        view = provider_settings({
            "OPENAI_API_KEY": "sk",
            "OPENAI_API_URL": "https://proxy",
            "SMALL_OPENAI_MODEL": "gpt-4o-mini",
            "LARGE_OPENAI_MODEL": "gpt-4o",
            "IMAGE_OPENAI_MODEL": "dall-e-3",
        }, "OpenAI")

        assert view.name == "openai"
        assert view.api_key == "sk"
        assert view.api_url == "https://proxy"
        assert view.small_model == "gpt-4o-mini"
        assert view.medium_model is None
        assert view.large_model == "gpt-4o"
        assert view.image_model == "dall-e-3"
        assert view.is_configured is True
        assert view.has_model_overrides is True

    def test_bedrock_view(self):
        view = provider_settings({
            "BEDROCK_REGION": "us-east-1",
            "BEDROCK_ACCESS_KEY": "AKIA",
            "BEDROCK_SECRET_KEY": "secret",
        }, "bedrock")

        assert view.region == "us-east-1"
        assert view.api_key == "AKIA"
        assert view.secret_key == "secret"
        assert view.is_configured is True

    def test_empty_values_read_as_unset(self):
        view = provider_settings({"MISTRAL_API_KEY": ""}, "mistral")

        assert view.api_key is None
        assert view.is_configured is False
        assert view.has_model_overrides is False

    def test_unknown_provider(self):
        with pytest.raises(ValueError, match="Unknown provider 'acme'"):
            provider_settings({}, "acme")


class TestEmbeddingSettings:

    def test_defaults(self):
        view = embedding_settings({})

        assert view.use_openai_embedding is False
        assert view.use_ollama_embedding is False
        assert view.ollama_embedding_model == DEFAULT_OLLAMA_EMBEDDING_MODEL

    def test_toggles(self):
        view = embedding_settings({
            "USE_OPENAI_EMBEDDING": "true",
            "USE_OLLAMA_EMBEDDING": "maybe",
            "OLLAMA_EMBEDDING_MODEL": "nomic-embed-text",
        })

        assert view.use_openai_embedding is True
        assert view.use_ollama_embedding is False
        assert view.ollama_embedding_model == "nomic-embed-text"
