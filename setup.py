"""
setup.py

Packaging metadata and CLI entry point for agent-settings.

Version: 0.2.0 — Explicit settings lifecycle with injectable execution
contexts, first-class namespaced settings and the x-api-key gate for the
HTTP API.
"""
from setuptools import setup, find_packages

setup(
    name="agent-settings",
    version="0.2.0",
    packages=find_packages(include=["envsettings", "envsettings.*", "api", "api.*", "cli", "cli.*"]),
    install_requires=[
        "click",
        "python-dotenv>=1.0",
        "pydantic>=2.0",
        "fastapi",
    ],
    extras_require={
        "server": [
            "uvicorn",
        ],
        "test": [
            "pytest",
            "hypothesis",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "agent-settings=cli:cli",
        ],
    },
    python_requires=">=3.8",
)
