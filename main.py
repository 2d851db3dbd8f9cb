"""
Sport Event Manager - Main entry point.

Serves the event list and the admin page over aiohttp.
All data lives in Supabase.
"""

import asyncio
import logging
import os
import sys
from aiohttp import web
from config.features import features
from config.settings import settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler("web.log", encoding="utf-8"),
    ],
)
logger = logging.getLogger(__name__)

# Set DEBUG level only for our app loggers, not for noisy libraries
if features.DEBUG_MODE or settings.debug:
    for name in ['adapters', 'core', 'infrastructure', '__main__']:
        logging.getLogger(name).setLevel(logging.DEBUG)
# Silence noisy HTTP logs from the Supabase client
logging.getLogger('httpx').setLevel(logging.WARNING)
logging.getLogger('httpcore').setLevel(logging.WARNING)
logging.getLogger('hpack').setLevel(logging.WARNING)


async def main():
    """Start the web server and keep it running."""
    logger.info("=== Sport Event Manager Starting ===")
    logger.info("Feature Flags:")
    for key, value in features.to_dict().items():
        logger.info(f"  {key}: {value}")

    # Imported here so logging is configured before the Supabase client is built
    from adapters.web.loader import create_app

    port = int(os.environ.get("PORT", settings.web_port))
    runner = web.AppRunner(create_app())
    await runner.setup()
    site = web.TCPSite(runner, settings.web_host, port)
    await site.start()
    logger.info(f"Listening on http://{settings.web_host}:{port}")

    try:
        await asyncio.Event().wait()
    finally:
        await runner.cleanup()
        logger.info("Web server stopped.")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Stopped by user (Ctrl+C)")
    except SystemExit as e:
        sys.exit(e.code)
