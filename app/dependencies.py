from dotenv import load_dotenv
load_dotenv()

from app.config import load_settings
from app.services.supabase_client import get_supabase
from app.services.llm_client import get_chat_model
from app.services.conversation_service import ConversationService
from app.services.fallback_service import FallbackService
from app.services.orchestrator_service import WebhookOrchestrator

settings = load_settings()

# Initialize Singletons (read-only after startup)
supabase_client = get_supabase(settings.supabase_url, settings.supabase_key)
chat_model = get_chat_model(settings)

conversation_service = ConversationService(supabase_client, settings.conversations_table)
fallback_service = FallbackService(chat_model)

# Orchestrator (Dialogflow fulfillment pipeline)
orchestrator = WebhookOrchestrator(
    conversation_service=conversation_service,
    fallback_service=fallback_service,
)


def get_orchestrator() -> WebhookOrchestrator:
    return orchestrator
