from app.config import DEFAULT_CONVERSATIONS_TABLE, DEFAULT_GEMINI_MODEL, Settings, load_settings
from app.services.llm_client import get_chat_model


def test_defaults(monkeypatch):
    for name in ("SUPABASE_URL", "SUPABASE_ANON_KEY", "SUPABASE_CONVERSATIONS_TABLE",
                 "GEMINI_API_KEY", "GEMINI_MODEL", "PORT", "LLM_PROVIDER"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.supabase_url is None
    assert settings.conversations_table == DEFAULT_CONVERSATIONS_TABLE
    assert settings.gemini_model == DEFAULT_GEMINI_MODEL
    assert settings.port == 3000


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SUPABASE_CONVERSATIONS_TABLE", "tickets")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-2.0-flash")
    monkeypatch.setenv("PORT", "8080")

    settings = load_settings()

    assert settings.conversations_table == "tickets"
    assert settings.gemini_model == "gemini-2.0-flash"
    assert settings.port == 8080


def test_invalid_port_uses_default(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")
    assert load_settings().port == 3000


def test_chat_model_missing_key_is_degraded_mode():
    assert get_chat_model(Settings()) is None
    assert get_chat_model(Settings(llm_provider="openai")) is None
