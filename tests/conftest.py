from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock

import pytest

from app.services.fallback_service import FallbackService
from app.services.orchestrator_service import WebhookOrchestrator


def make_request(intent="Default Welcome Intent", parameters=None, query_text="", **extra):
    body = {
        "responseId": "response-1",
        "session": "projects/demo/agent/sessions/abc123",
        "queryResult": {
            "queryText": query_text,
            "parameters": parameters if parameters is not None else {},
            "intent": {"displayName": intent},
        },
        "originalDetectIntentRequest": {"source": "DIALOGFLOW_CONSOLE"},
    }
    body.update(extra)
    return body


@pytest.fixture
def supabase_client():
    client = Mock()
    client.table.return_value.insert.return_value.execute.return_value = SimpleNamespace(data=[{"id": 42}])
    return client


@pytest.fixture
def conversation_service():
    service = Mock()
    service.save = AsyncMock(return_value=None)
    return service


@pytest.fixture
def fallback_service():
    service = Mock()
    service.generate = AsyncMock(return_value="Here is what I found.")
    return service


@pytest.fixture
def orchestrator(conversation_service, fallback_service):
    return WebhookOrchestrator(conversation_service, fallback_service)


@pytest.fixture
def offline_orchestrator(conversation_service):
    """Orchestrator whose fallback has no chat model configured."""
    return WebhookOrchestrator(conversation_service, FallbackService(None))
