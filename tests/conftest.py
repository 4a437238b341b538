# tests/conftest.py
import logging
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from english_coach.core.config import Settings, get_settings
from english_coach.main import app

TEST_GEMINI_API_KEY = "test-gemini-api-key"
TEST_MODEL_NAME = "gemini-test-lite"


def build_gemini_response(text):
    """Mimics the shape of a google.generativeai GenerateContentResponse."""
    part = SimpleNamespace(text=text)
    candidate = SimpleNamespace(content=SimpleNamespace(parts=[part]))
    return SimpleNamespace(candidates=[candidate])


@pytest.fixture
def test_settings() -> Settings:
    return Settings(GEMINI_API_KEY=TEST_GEMINI_API_KEY, GEMINI_MODEL_NAME_LITE=TEST_MODEL_NAME, CORS_ALLOW_ORIGIN="*")


@pytest.fixture
def unconfigured_settings() -> Settings:
    return Settings(GEMINI_API_KEY=None)


@pytest.fixture
def gemini_response():
    return build_gemini_response


@pytest.fixture
def mock_genai(mocker):
    """Replaces the google.generativeai module used by the completion client."""
    genai_mock = mocker.patch("english_coach.services.gemini_client.genai")
    genai_mock.GenerativeModel.return_value.generate_content_async = AsyncMock(
        return_value=build_gemini_response("yes")
    )
    return genai_mock


@pytest.fixture
def gemini_model(mock_genai):
    """The model instance the client talks to; set `generate_content_async` results on it."""
    return mock_genai.GenerativeModel.return_value


@pytest.fixture
def client(test_settings) -> TestClient:
    """Provides a TestClient whose handlers see a configured Gemini key."""
    app.dependency_overrides[get_settings] = lambda: test_settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def unconfigured_client(unconfigured_settings) -> TestClient:
    """Provides a TestClient whose handlers see no Gemini key."""
    app.dependency_overrides[get_settings] = lambda: unconfigured_settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def pytest_configure(config):
    """
    Hook to configure logging levels before tests are run.
    This silences noisy third-party libraries.
    """
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
