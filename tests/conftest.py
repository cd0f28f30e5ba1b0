"""Pytest configuration and shared fixtures."""
import os

import pytest

from rxlens.conversation import UploadedAsset
from rxlens.display import ConversationLog, RecordingIndicator
from rxlens.errors import TransportError
from rxlens.orchestrator import RequestOrchestrator
from rxlens.transport import Transport


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "gemini": os.getenv("GEMINI_API_KEY"),
    }


@pytest.fixture
def asset():
    """A small JPEG-typed asset."""
    return UploadedAsset(content=b"\xff\xd8\xff\xe0fake-jpeg", mime_type="image/jpeg", name="rx.jpg")


@pytest.fixture
def log():
    return ConversationLog()


@pytest.fixture
def indicator():
    return RecordingIndicator()


@pytest.fixture
def server_error():
    return TransportError("Internal error encountered.", status_code=500)


@pytest.fixture
def make_orchestrator(log, indicator):
    """Factory for an orchestrator wired to the in-memory collaborators."""
    def _make(transport: Transport) -> RequestOrchestrator:
        return RequestOrchestrator(
            transport=transport,
            display=log,
            indicator=indicator,
            instruction="Read this prescription.",
        )
    return _make
