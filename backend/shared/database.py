"""
Database client factory for Supabase.

The service-role client is process-wide. The application lifespan calls
connect() on startup and disconnect() on shutdown; repositories receive the
client through their constructor rather than reaching for it themselves.
"""

import logging
from typing import Optional
from supabase import create_client, Client

from .config import get_settings

logger = logging.getLogger(__name__)

# Module-level client cache
_service_client: Optional[Client] = None


def connect() -> Client:
    """
    Create the Supabase service-role client if it does not exist yet.

    Returns:
        Supabase client configured with service role key

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )
        logger.info("Connected to Supabase at %s", settings.supabase_url)

    return _service_client


def get_supabase_client() -> Client:
    """
    Get the Supabase client with service role (bypasses RLS).

    Connects lazily when the lifespan hook has not run (scripts, tests).
    Ownership is enforced by the repositories, not by RLS.
    """
    return connect()


def is_connected() -> bool:
    """Whether a client is currently cached."""
    return _service_client is not None


def disconnect() -> None:
    """
    Drop the cached database client.

    Called on application shutdown and in test teardown. The next call to
    get_supabase_client() creates a fresh client.
    """
    global _service_client
    if _service_client is not None:
        logger.info("Disconnected from Supabase")
    _service_client = None
