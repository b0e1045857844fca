"""Fetch the countries API and cache the response in data/countries.json.

Overwrites the previous snapshot only when the fetch succeeds. Run the
seed step afterwards to load the snapshot into MongoDB.

Usage: python -m scripts.fetch_countries
"""

import asyncio
import logging

from country_seeder.config import settings
from country_seeder.errors import SeederError
from country_seeder.fetch.service import fetch_and_cache
from country_seeder.logging_config import setup_logging

logger = logging.getLogger(__name__)


async def fetch() -> bool:
    try:
        await fetch_and_cache(settings.COUNTRIES_URL, settings.SNAPSHOT_PATH, timeout=settings.HTTP_TIMEOUT)
    except SeederError as exc:
        logger.error("Fetch failed, snapshot left unchanged: %s", exc)
        return False
    return True


def main() -> None:
    setup_logging(settings.LOG_LEVEL)
    asyncio.run(fetch())


if __name__ == "__main__":
    main()
