"""
WebhookOrchestrator: Routes one Dialogflow turn to its branch.

    Default Welcome Intent -> static greeting with a Customer Support chip
    Customer Support       -> collect name/email/message, log the request
    anything else          -> generative fallback reply

Decoupled from HTTP; every failure ends as a text reply.
"""

import logging
from enum import Enum
from typing import Any

from app.models.dialogflow_models import ConversationRecord
from app.services.payload_service import DialogflowRequestData, extract_dialogflow_data
from app.services import response_service
from app.utils.data_extraction import extract_email, extract_name, extract_user_message

logger = logging.getLogger(__name__)

WELCOME_INTENT = "Default Welcome Intent"
SUPPORT_INTENT = "Customer Support"

# Chip labels (or quick replies) mapped to server-side intents
CHIP_INTENT_MAP = {
    "customer support": SUPPORT_INTENT,
    "customer support help": SUPPORT_INTENT,
}

DEFAULT_FALLBACK_PROMPT = "Hello"


class Route(str, Enum):
    WELCOME = "welcome"
    SUPPORT = "support"
    FALLBACK = "fallback"


def resolve_intent(intent: str, query_text: str) -> str:
    """The detected intent, unless the query text is a known chip label."""
    normalized_query = (query_text or "").strip().lower()
    return CHIP_INTENT_MAP.get(normalized_query, intent)


def classify(intent: str, query_text: str) -> Route:
    intent_name = resolve_intent(intent, query_text)
    if intent_name == WELCOME_INTENT:
        return Route.WELCOME
    if intent_name == SUPPORT_INTENT:
        return Route.SUPPORT
    return Route.FALLBACK


class WebhookOrchestrator:
    """Dispatches Dialogflow turns; collaborators are injected for testing."""

    def __init__(self, conversation_service, fallback_service):
        self.conversations = conversation_service
        self.fallback = fallback_service

    # =================================================================
    #  PUBLIC ENTRY POINT
    # =================================================================

    async def process(self, raw_body: Any) -> dict:
        """Returns a JSON-serializable fulfillment response, never raises."""
        try:
            logger.info("Request received")
            data = extract_dialogflow_data(raw_body)
            return await self._dispatch(data)
        except Exception:
            logger.exception("Error handling Dialogflow request")
            return response_service.build_plain_text_response(response_service.GENERIC_ERROR_MESSAGE)

    async def _dispatch(self, data: DialogflowRequestData) -> dict:
        route = classify(data.intent, data.query_text)

        resolved = resolve_intent(data.intent, data.query_text)
        if resolved != data.intent:
            logger.info("Overriding intent based on chip selection: %s", resolved)

        if route is Route.WELCOME:
            return self._handle_welcome()
        if route is Route.SUPPORT:
            return await self._handle_support(data)
        return await self._handle_fallback(data)

    # =================================================================
    #  BRANCHES
    # =================================================================

    def _handle_welcome(self) -> dict:
        logger.info("Welcome intent")
        return response_service.build_welcome_response()

    async def _handle_support(self, data: DialogflowRequestData) -> dict:
        logger.info("Customer Support intent triggered")
        user_name = extract_name(data.parameters)
        user_email = extract_email(data.parameters)
        user_message = extract_user_message(data.parameters, data.query_text)

        missing_fields = []
        if not user_name:
            missing_fields.append("name")
        if not user_email:
            missing_fields.append("email")
        if not user_message:
            missing_fields.append("message")

        if missing_fields:
            logger.info("Support request incomplete, missing: %s", ", ".join(missing_fields))
            return response_service.build_missing_fields_response(missing_fields)

        await self.conversations.save(ConversationRecord(
            session_id=data.session_id,
            intent_name=SUPPORT_INTENT,
            user_name=user_name,
            user_email=user_email,
            user_message=user_message,
            channel=data.channel,
        ))

        return response_service.build_confirmation_response(user_name, user_email)

    async def _handle_fallback(self, data: DialogflowRequestData) -> dict:
        logger.info("Fallback handler hit for intent '%s'", data.intent)
        fallback_text = await self.fallback.generate(data.query_text or DEFAULT_FALLBACK_PROMPT)
        return response_service.build_plain_text_response(fallback_text)
