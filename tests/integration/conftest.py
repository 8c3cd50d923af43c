"""Pytest configuration and fixtures for integration tests.

These tests call the live Spoonacular API and consume quota. They are
skipped unless SPOONACULAR_API_KEY is available in the environment or .env.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv


def pytest_configure(config):
    """Load .env from the project root before test collection."""
    env_path = Path(__file__).parent.parent.parent / ".env"
    load_dotenv(env_path)


@pytest.fixture(scope="session", autouse=True)
def check_api_key():
    """Skip the integration session when no API key is configured."""
    if not os.getenv("SPOONACULAR_API_KEY"):
        pytest.skip(
            "Integration tests skipped. Missing SPOONACULAR_API_KEY. Please set it in your .env file.",
            allow_module_level=True,
        )
