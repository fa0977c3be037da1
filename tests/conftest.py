"""
Pytest configuration and shared fixtures.

No test talks to a real LLM: FakeLLM returns scripted replies keyed by the
platform id that appears in the user prompt.
"""
import pytest
from fastapi.testclient import TestClient

from agent.llm.base import LLMClient
from tests.fakes import FakeLLM


@pytest.fixture
def fake_llm() -> FakeLLM:
    return FakeLLM()


@pytest.fixture
def make_client():
    """Build a TestClient whose generate requests use the given LLM client."""
    from web.app import create_app

    def _make(llm: LLMClient) -> TestClient:
        return TestClient(create_app(llm_factory=lambda: llm))

    return _make


@pytest.fixture
def client(make_client, fake_llm) -> TestClient:
    return make_client(fake_llm)
