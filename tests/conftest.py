"""
Pytest configuration and fixtures for test isolation.
"""
import os

import pytest
from hypothesis import HealthCheck, settings

import envsettings
from envsettings.utils.logging_config import logging_config

# Hypothesis builds its character-table cache on first use, which can trip the
# too_slow health check on a clean checkout.
settings.register_profile("default", suppress_health_check=[HealthCheck.too_slow])
settings.load_profile("default")


@pytest.fixture(autouse=True, scope="function")
def reset_environment():
    """Reset environment variables and the settings singleton between tests."""
    original_env = os.environ.copy()
    envsettings.reset()
    yield
    envsettings.reset()
    logging_config.reset()
    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def project_tree(tmp_path):
    """
    Directory tree with a .env at the project root and none closer:

        project/.env
        project/src/pkg/deep/
    """
    project = tmp_path / "project"
    deep = project / "src" / "pkg" / "deep"
    deep.mkdir(parents=True)
    (project / ".env").write_text(
        "OPENAI_API_KEY=sk-test\n"
        "LARGE_OPENAI_MODEL=gpt-4o\n"
        "openai.key=abc\n"
        "openai.model=gpt\n"
        "a.b.c=v\n"
        "plain=x\n",
        encoding="utf-8",
    )
    return project, deep
