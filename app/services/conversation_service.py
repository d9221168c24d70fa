import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool
from supabase import Client

from app.models.dialogflow_models import ConversationRecord

logger = logging.getLogger(__name__)


class ConversationService:
    """
    Persists completed support requests to Supabase.
    Best effort: an unconfigured client or a failed insert is logged and
    never reaches the caller.
    """

    def __init__(self, client: Optional[Client], table_name: str):
        self.client = client
        self.table_name = table_name

    async def save(self, record: ConversationRecord) -> None:
        """
        Inserts one row for the record.

        Args:
            record: Completed support request
        """
        if not self.client:
            logger.warning("Skipping Supabase insert because client is not initialised.")
            return

        row = record.sanitized()
        try:
            # supabase-py is synchronous; keep the event loop free
            response = await run_in_threadpool(self._insert, row)
        except Exception as e:
            logger.error("Failed to store conversation in Supabase: %s", e)
            return

        inserted = response.data[0] if response.data else {}
        logger.info("Conversation stored in Supabase %s", inserted.get("id", ""))

    def _insert(self, row: dict):
        return self.client.table(self.table_name).insert([row]).execute()
