import pytest
from fastapi.testclient import TestClient

from fakes import make_fake_client
from gemini.config import FALLBACK_MODELS, Settings
from main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key")


@pytest.fixture
def make_http_client(settings):
    """Build a TestClient over the real app wired to a fake Gemini client."""
    def _make(replies: dict):
        fake = make_fake_client(replies)
        return TestClient(create_app(settings, client=fake)), fake

    return _make


@pytest.fixture
def all_ok():
    return {name: f"reply from {name}" for name in FALLBACK_MODELS}
