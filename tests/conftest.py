"""Shared fixtures: settings, store, fake language-model clients and an app client."""

from typing import List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from neura_os.api.app import create_app
from neura_os.config import Settings
from neura_os.core.ai_service import LLMResult
from neura_os.services.state_store import StateStore


class FakeChatClient:
    """Chat client returning a canned result and recording the prompts it saw."""

    def __init__(self, result: Optional[LLMResult] = None):
        self.model_name = "fake-model"
        self.result = result if result is not None else LLMResult.success("Take a short walk, then pick one task.")
        self.calls: List[Tuple[str, str]] = []
        self.closed = False

    async def complete(self, system_prompt: str, user_prompt: str) -> LLMResult:
        self.calls.append((system_prompt, user_prompt))
        return self.result

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def settings(monkeypatch):
    for name in ("OPENAI_API_KEY", "PORT", "LOG_LEVEL", "CORS_ORIGIN", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)
    return Settings(_env_file=None, OPENAI_API_KEY=None)


@pytest.fixture
def store():
    return StateStore()


@pytest.fixture
def fake_client():
    return FakeChatClient()


@pytest.fixture
def failing_client():
    return FakeChatClient(LLMResult.failure("connection refused"))


@pytest.fixture
def make_client(settings):
    """Factory for a TestClient around a fresh app; lifespan runs on enter."""
    clients = []

    def _make(chat_client=None) -> TestClient:
        client = TestClient(create_app(settings, chat_client=chat_client), raise_server_exceptions=False)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client):
    return make_client()
