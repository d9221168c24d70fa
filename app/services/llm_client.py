import logging
from typing import Optional

from langchain_core.language_models.chat_models import BaseChatModel

from app.config import Settings

logger = logging.getLogger(__name__)


def get_chat_model(settings: Settings) -> Optional[BaseChatModel]:
    """
    Returns a configured Chat Model based on settings.llm_provider, or None
    when the provider's API key is missing.
    """
    if settings.llm_provider.lower() == "openai":
        return _get_openai_model(settings)
    else:
        return _get_google_model(settings)


def _get_google_model(settings: Settings) -> Optional[BaseChatModel]:
    """Configuration for Google Gemini."""
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY missing; fallback will use default message.")
        return None

    from langchain_google_genai import ChatGoogleGenerativeAI

    logger.info("Using Google model: %s", settings.gemini_model)

    return ChatGoogleGenerativeAI(
        model=settings.gemini_model,
        temperature=1.0 if "gemini-3" in settings.gemini_model else 0,
        google_api_key=settings.gemini_api_key,
    )


def _get_openai_model(settings: Settings) -> Optional[BaseChatModel]:
    """Configuration for OpenAI."""
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY missing; fallback will use default message.")
        return None

    from langchain_openai import ChatOpenAI

    logger.info("Using OpenAI model: %s", settings.openai_model)

    return ChatOpenAI(
        model=settings.openai_model,
        temperature=0,
        openai_api_key=settings.openai_api_key,
    )
