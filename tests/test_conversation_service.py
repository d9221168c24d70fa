import logging

import pytest
from pydantic import ValidationError

from app.models.dialogflow_models import ConversationRecord
from app.services.conversation_service import ConversationService


def _record(**overrides):
    fields = dict(
        session_id="projects/demo/agent/sessions/abc123",
        intent_name="Customer Support",
        user_name="Ali",
        user_email="ali@example.com",
        user_message="need help",
        channel="DIALOGFLOW_CONSOLE",
    )
    fields.update(overrides)
    return ConversationRecord(**fields)


async def test_inserts_one_row(supabase_client):
    service = ConversationService(supabase_client, "support_conversations")

    await service.save(_record())

    supabase_client.table.assert_called_once_with("support_conversations")
    supabase_client.table.return_value.insert.assert_called_once_with([{
        "session_id": "projects/demo/agent/sessions/abc123",
        "intent_name": "Customer Support",
        "user_name": "Ali",
        "user_email": "ali@example.com",
        "user_message": "need help",
        "channel": "DIALOGFLOW_CONSOLE",
    }])


async def test_empty_fields_are_sent_as_null(supabase_client):
    service = ConversationService(supabase_client, "support_conversations")

    await service.save(_record(session_id="", channel=None))

    row = supabase_client.table.return_value.insert.call_args.args[0][0]
    assert row["session_id"] is None
    assert row["channel"] is None


async def test_skips_without_client(caplog):
    service = ConversationService(None, "support_conversations")

    with caplog.at_level(logging.WARNING):
        await service.save(_record())

    assert "Skipping Supabase insert" in caplog.text


async def test_insert_failure_is_logged_not_raised(supabase_client, caplog):
    supabase_client.table.return_value.insert.return_value.execute.side_effect = RuntimeError("insert failed")
    service = ConversationService(supabase_client, "support_conversations")

    with caplog.at_level(logging.ERROR):
        await service.save(_record())

    assert "insert failed" in caplog.text


def test_record_is_immutable():
    record = _record()
    with pytest.raises(ValidationError):
        record.user_name = "Sara"
    assert record.user_name == "Ali"
