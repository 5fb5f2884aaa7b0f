"""
Unit tests for Environment Variable utilities.

Tests the centralized environment variable definitions and advisory checks.
"""

import os
from unittest.mock import patch

from envsettings.environment import EnvironmentVariables


class TestEnvironmentVariables:
    """Test suite for EnvironmentVariables utilities."""

    def test_recognized_keys_cover_providers_and_tiers(self):
        variables = EnvironmentVariables.get_all_variables()

        for expected in (
            'OPENAI_API_KEY', 'OPENAI_API_URL', 'ANTHROPIC_API_KEY', 'ANTHROPIC_API_URL',
            'GOOGLE_API_KEY', 'MISTRAL_API_KEY', 'BEDROCK_REGION', 'BEDROCK_ACCESS_KEY',
            'BEDROCK_SECRET_KEY', 'PORTKEY_API_KEY', 'PORTKEY_API_URL',
            'SMALL_OPENAI_MODEL', 'IMAGE_OPENAI_MODEL', 'LARGE_ANTHROPIC_MODEL',
            'MEDIUM_MISTRAL_MODEL', 'EMBEDDING_PORTKEY_MODEL', 'SYSTEM_PROMPT', 'API_KEY',
        ):
            assert expected in variables

        assert len(variables) == len(set(variables))
        assert 'EMBEDDING_ANTHROPIC_MODEL' not in variables

    def test_get_variable_documentation(self):
        """Test that documentation is provided for all variables."""
        docs = EnvironmentVariables.get_variable_documentation()
        variables = EnvironmentVariables.get_all_variables()

        assert set(docs.keys()) == set(variables)
        for var, doc in docs.items():
            assert isinstance(doc, str)
            assert len(doc.strip()) > 0

    def test_is_sensitive(self):
        assert EnvironmentVariables.is_sensitive('OPENAI_API_KEY')
        assert EnvironmentVariables.is_sensitive('BEDROCK_SECRET_KEY')
        assert EnvironmentVariables.is_sensitive('token')
        assert not EnvironmentVariables.is_sensitive('LARGE_OPENAI_MODEL')
        assert not EnvironmentVariables.is_sensitive('SYSTEM_PROMPT')

    def test_validate_clean_setup(self):
        warnings, errors = EnvironmentVariables.validate_environment_setup({
            'OPENAI_API_KEY': 'sk-test',
            'LARGE_OPENAI_MODEL': 'gpt-4o',
            'USE_OPENAI_EMBEDDING': 'true',
        })

        assert warnings == []
        assert errors == []

    def test_validate_invalid_toggle_is_error(self):
        warnings, errors = EnvironmentVariables.validate_environment_setup({
            'USE_OLLAMA_EMBEDDING': 'maybe',
        })

        assert len(errors) == 1
        assert 'Invalid USE_OLLAMA_EMBEDDING' in errors[0]

    def test_validate_model_override_without_credentials_warns(self):
        warnings, errors = EnvironmentVariables.validate_environment_setup({
            'SMALL_ANTHROPIC_MODEL': 'claude-3-haiku',
        })

        assert errors == []
        assert len(warnings) == 1
        assert 'ANTHROPIC_API_KEY is not set' in warnings[0]

    def test_validate_both_embeddings_warns(self):
        warnings, _ = EnvironmentVariables.validate_environment_setup({
            'USE_OPENAI_EMBEDDING': '1',
            'USE_OLLAMA_EMBEDDING': 'yes',
        })

        assert any('Both USE_OPENAI_EMBEDDING and USE_OLLAMA_EMBEDDING' in w for w in warnings)

    @patch.dict(os.environ, {'MEDIUM_MISTRAL_MODEL': 'mistral-medium'}, clear=True)
    def test_validate_defaults_to_process_environment(self):
        warnings, errors = EnvironmentVariables.validate_environment_setup()

        assert errors == []
        assert any('MISTRAL_API_KEY is not set' in w for w in warnings)

    def test_get_setup_instructions(self):
        instructions = EnvironmentVariables.get_setup_instructions()

        assert '.env' in instructions
        assert 'OPENAI_API_KEY' in instructions
