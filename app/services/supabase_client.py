"""
Singleton Supabase client.
Built once at startup and shared by every request; None when the
credentials are not configured.
"""

import logging
from supabase import create_client, Client
from typing import Optional

logger = logging.getLogger(__name__)

_client: Optional[Client] = None


def get_supabase(supabase_url: Optional[str], supabase_key: Optional[str]) -> Optional[Client]:
    """Returns the shared Supabase client, creating it on first call."""
    global _client
    if _client is not None:
        return _client

    if not supabase_url or not supabase_key:
        logger.warning("Supabase credentials are missing. Conversation logging will be skipped.")
        return None

    _client = create_client(supabase_url, supabase_key)
    logger.info("Supabase client initialised")
    return _client
