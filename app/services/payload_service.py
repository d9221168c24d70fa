"""
PayloadService: Extracts the fields the router needs from a Dialogflow ES
fulfillment request.

Expected body:
    {
        "responseId": "...",
        "session": "projects/<id>/agent/sessions/<session>",
        "queryResult": {
            "queryText": "...",
            "parameters": {...},
            "intent": {"displayName": "..."}
        },
        "originalDetectIntentRequest": {"source": "..."}
    }
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from app.exceptions import MalformedRequestError
from app.utils.helpers import first_truthy, get_nested_value

logger = logging.getLogger(__name__)

DEFAULT_CHANNEL = "dialogflow"


@dataclass
class DialogflowRequestData:
    """Normalized data for one user turn."""
    intent: str = ""
    parameters: Dict[str, Any] = field(default_factory=dict)
    session_id: Optional[str] = None
    channel: str = DEFAULT_CHANNEL
    query_text: str = ""


def extract_dialogflow_data(raw_body: Any) -> DialogflowRequestData:
    """
    Pull intent, parameters, session and channel out of the raw body.
    Raises MalformedRequestError when queryResult or its intent is missing.
    """
    if not isinstance(raw_body, dict):
        raise MalformedRequestError("Request body is not a JSON object")

    query_result = raw_body.get("queryResult")
    if not isinstance(query_result, dict):
        raise MalformedRequestError("queryResult is missing from the request")

    intent = query_result.get("intent")
    if not isinstance(intent, dict):
        raise MalformedRequestError("queryResult.intent is missing from the request")

    query_text = query_result.get("queryText") or ""
    if not isinstance(query_text, str):
        raise MalformedRequestError("queryResult.queryText must be a string")

    parameters = query_result.get("parameters") or {}
    if not isinstance(parameters, dict):
        logger.warning("Ignoring non-object parameters: %r", parameters)
        parameters = {}

    intent_name = intent.get("displayName")
    session_id = first_truthy(
        raw_body.get("session"),
        raw_body.get("sessionId"),
        raw_body.get("responseId"),
    )
    channel = get_nested_value(raw_body, ["originalDetectIntentRequest", "source"])

    data = DialogflowRequestData(
        intent=intent_name if isinstance(intent_name, str) else "",
        parameters=parameters,
        session_id=str(session_id) if session_id else None,
        channel=str(channel) if channel else DEFAULT_CHANNEL,
        query_text=query_text,
    )
    logger.info("Dialogflow turn: intent='%s' | session=%s | channel=%s", data.intent, data.session_id, data.channel)
    return data
