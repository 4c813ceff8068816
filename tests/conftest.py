"""
Pytest configuration and fixtures
"""
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from journal_guru.api.app import create_app
from journal_guru.configuration import Settings


class StubProvider:
    """Records every call and answers with fixed text or a fixed failure."""

    name = "stub"

    def __init__(self, text: str = "1. Reflect...", error: Optional[Exception] = None):
        self.text = text
        self.error = error
        self.calls: List[dict] = []

    def generate(self, instruction: str, *, model: str, max_tokens: int) -> str:
        self.calls.append({"instruction": instruction, "model": model, "max_tokens": max_tokens})
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def settings() -> Settings:
    return Settings(
        llm_provider="anthropic",
        llm_model=None,
        llm_max_tokens=2048,
        anthropic_api_key=None,
        google_api_key=None,
        openai_api_key=None,
        cors_origins=["*"],
        log_level="INFO",
    )


@pytest.fixture
def provider() -> StubProvider:
    return StubProvider()


@pytest.fixture
def client(settings: Settings, provider: StubProvider) -> TestClient:
    return TestClient(create_app(settings=settings, provider=provider))


@pytest.fixture
def valid_body() -> dict:
    return {"age": "26-35", "issue": "new job", "lens": "stoic", "numPrompts": "3-5"}
