import json
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from services.llm_service import LLMService, set_llm_service
from utils.config import get_settings
from utils.session_manager import reset_sessions
from utils.store import reset_store


@pytest.fixture(autouse=True)
def clean_state():
    reset_store()
    reset_sessions()
    yield
    reset_store()
    reset_sessions()
    set_llm_service(None)


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def client():
    from main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def offline_locator(monkeypatch):
    """
    No network for the locator: reverse geocoding returns nothing (region
    rules still apply) and the live places search is empty.

    Returns the list of keywords the places search was called with.
    """
    calls = []

    def fake_search(lat, lng, keyword, radius_m=None):
        calls.append(keyword)
        return []

    monkeypatch.setattr("services.geocoding_service.reverse_geocode", lambda lat, lng: None)
    monkeypatch.setattr("services.facility_service.search_nearby", fake_search)
    return calls


class FakeChatModel:
    """Stands in for the langchain chat model: records prompts, returns a canned answer"""

    def __init__(self, content):
        self.content = content
        self.calls = []

    def invoke(self, messages):
        self.calls.append(messages)
        if isinstance(self.content, Exception):
            raise self.content
        return SimpleNamespace(content=self.content)


def analysis_json(needs_review=False, **overrides):
    data = {
        "summary": "Haemoglobin slightly low, otherwise normal.",
        "keyFindings": ["Haemoglobin 11.2 g/dL"],
        "recommendations": ["Repeat CBC in 4 weeks"],
        "confidence": 0.9,
        "needsReview": needs_review,
    }
    data.update(overrides)
    return json.dumps(data)


@pytest.fixture
def fake_llm():
    """Install an LLMService backed by FakeChatModel; set `.content` to change the answer"""
    model = FakeChatModel(analysis_json())
    set_llm_service(LLMService(client=model))
    return model
