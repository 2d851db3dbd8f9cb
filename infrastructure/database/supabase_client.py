"""
Supabase client initialization.
Single point of database connection.
"""

from supabase import create_client, Client
import asyncio
import concurrent.futures
import logging
import sys
from functools import wraps
from config.settings import settings

logger = logging.getLogger(__name__)

_supabase_url = settings.supabase_url
_supabase_key = settings.supabase_api_key

if not _supabase_url or not _supabase_key:
    logger.critical(
        "Supabase credentials not configured! "
        "Required env vars: SUPABASE_URL, SUPABASE_SERVICE_KEY (or SUPABASE_KEY). "
        f"SUPABASE_URL: {'set' if _supabase_url else 'MISSING'}, "
        f"SUPABASE_KEY: {'set' if _supabase_key else 'MISSING'}"
    )
    sys.exit(1)

# Schema isolation: staging can point DB_SCHEMA at its own schema
if settings.db_schema != "public":
    from supabase.lib.client_options import ClientOptions
    supabase: Client = create_client(
        _supabase_url, _supabase_key,
        options=ClientOptions(schema=settings.db_schema)
    )
else:
    supabase: Client = create_client(_supabase_url, _supabase_key)


# Bounded thread pool for DB operations; the SDK is blocking.
_db_executor = concurrent.futures.ThreadPoolExecutor(
    max_workers=10,
    thread_name_prefix="supabase-db",
)


def run_sync(func):
    """
    Decorator to run synchronous Supabase operations in async context.
    Supabase Python SDK is synchronous, so we need this wrapper.
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(_db_executor, lambda: func(*args, **kwargs))
    return wrapper
