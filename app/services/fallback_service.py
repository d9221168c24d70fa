"""
FallbackService: Replies to anything the router has no handler for by
asking the configured chat model. Always returns text, never raises.
"""

import logging
from typing import Any, Optional

from langchain_core.language_models.chat_models import BaseChatModel

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_MESSAGE = "I'm sorry, I didn't catch that. Could you please rephrase?"
EMPTY_REPLY_MESSAGE = "I'm sorry, I still didn't understand. Could you please clarify?"


def extract_text(ai_message: Any) -> str:
    """Trimmed text of a chat model reply; content may be a string or a list of parts."""
    content = getattr(ai_message, "content", None)
    if isinstance(content, str):
        return content.strip()
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(str(part.get("text", "")))
        return "".join(parts).strip()
    return ""


class FallbackService:

    def __init__(self, chat_model: Optional[BaseChatModel] = None):
        self.model = chat_model

    async def generate(self, prompt: str) -> str:
        if self.model is None:
            logger.warning("Chat model not available; using default fallback message.")
            return DEFAULT_FALLBACK_MESSAGE

        try:
            response = await self.model.ainvoke(prompt)
            text = extract_text(response)
        except Exception as e:
            logger.error("Gemini fallback failed: %s", e)
            return DEFAULT_FALLBACK_MESSAGE

        return text or EMPTY_REPLY_MESSAGE
