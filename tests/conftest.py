"""
Pytest configuration and shared fixtures
"""
import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock
import sys
import os

# make the top-level packages importable
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from config.settings import Settings
from main import create_app
from providers.llm_provider import LLMProvider


def build_settings(**overrides) -> Settings:
    """Settings isolated from the host environment and .env file"""
    values = {
        "AI_PROVIDER": "openai",
        "OPENAI_API_KEY": "",
        "ALLOWED_ORIGINS": None,
        "CLIENT_API_KEY": None,
        "LOG_LEVEL": "INFO",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings_factory():
    return build_settings


@pytest.fixture
def generated_titles():
    """Provider answer with blank lines, CRLF and padding"""
    return "\n".join([
        "  Chill Vibes Only  ",
        "",
        "Clutch or Kick\r",
        "   ",
        "Road to Diamond",
    ])


@pytest.fixture
def mock_provider(generated_titles):
    """Stands in for the upstream chat-completion provider"""
    provider = AsyncMock(spec=LLMProvider)
    provider.generate.return_value = generated_titles
    provider.get_provider_name.return_value = "Test Provider"
    provider.is_available.return_value = True
    return provider


@pytest.fixture
def make_client(mock_provider):
    """TestClient factory taking settings overrides"""
    def _make(**overrides) -> TestClient:
        app = create_app(settings=build_settings(**overrides), provider=mock_provider)
        return TestClient(app)
    return _make


@pytest.fixture
def client(make_client):
    """Open-mode client: no origin list, no shared secret"""
    return make_client()


@pytest.fixture
def secured_client(make_client):
    """Client with a shared secret and an origin allow-list"""
    return make_client(
        CLIENT_API_KEY="front-end-secret",
        ALLOWED_ORIGINS="https://app.example.com, https://staging.example.com",
    )
