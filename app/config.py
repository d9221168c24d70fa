"""
Runtime settings read once from the environment at startup.
Missing Supabase credentials or model keys are allowed: the affected
component runs in degraded mode instead of failing the boot.
"""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_CONVERSATIONS_TABLE = "support_conversations"
DEFAULT_GEMINI_MODEL = "gemini-1.5-flash"
DEFAULT_OPENAI_MODEL = "gpt-5-mini"
DEFAULT_PORT = 3000


@dataclass(frozen=True)
class Settings:
    """Configuration container for the webhook's external collaborators."""
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    conversations_table: str = DEFAULT_CONVERSATIONS_TABLE
    llm_provider: str = "google"
    gemini_api_key: Optional[str] = None
    gemini_model: str = DEFAULT_GEMINI_MODEL
    openai_api_key: Optional[str] = None
    openai_model: str = DEFAULT_OPENAI_MODEL
    port: int = DEFAULT_PORT


def _get_port(raw: Optional[str]) -> int:
    try:
        return int(raw) if raw else DEFAULT_PORT
    except ValueError:
        return DEFAULT_PORT


def load_settings() -> Settings:
    """Builds Settings from environment variables, applying defaults."""
    return Settings(
        supabase_url=os.getenv("SUPABASE_URL") or None,
        supabase_key=os.getenv("SUPABASE_ANON_KEY") or None,
        conversations_table=os.getenv("SUPABASE_CONVERSATIONS_TABLE") or DEFAULT_CONVERSATIONS_TABLE,
        llm_provider=os.getenv("LLM_PROVIDER", "google"),
        gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
        gemini_model=os.getenv("GEMINI_MODEL") or DEFAULT_GEMINI_MODEL,
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        openai_model=os.getenv("OPENAI_MODEL") or DEFAULT_OPENAI_MODEL,
        port=_get_port(os.getenv("PORT")),
    )
