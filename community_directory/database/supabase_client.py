import logging
from typing import Optional

from supabase import Client, ClientOptions, create_client
from community_directory.config import settings

logger = logging.getLogger(__name__)


class SupabaseClient:
    _service_client: Optional[Client] = None

    @classmethod
    def get_service_client(cls) -> Optional[Client]:
        """Client with service_role key; bypasses RLS. None when the store is not configured."""
        if cls._service_client is None:
            if not settings.supabase_url or not settings.supabase_service_role_key:
                logger.error("Supabase client not initialized: SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY missing")
                return None
            cls._service_client = create_client(
                settings.supabase_url,
                settings.supabase_service_role_key,
                options=ClientOptions(auto_refresh_token=False, persist_session=False),
            )
        return cls._service_client

    @classmethod
    def reset_client(cls):
        cls._service_client = None


def get_supabase() -> Optional[Client]:
    return SupabaseClient.get_service_client()


def check_connection(supabase: Optional[Client]) -> bool:
    """Run a one-row select against profiles to confirm the store answers."""
    if supabase is None:
        return False
    try:
        supabase.table("profiles").select("id").limit(1).execute()
        return True
    except Exception as e:
        logger.error(f"Supabase connection test failed: {e}")
        return False
