"""Seed the countries collection from the cached snapshot in data/countries.json.

Replaces all existing countries, so it is safe to re-run: the collection
always ends up holding exactly one copy of each snapshot record.

Usage: python -m scripts.seed_db
"""

import asyncio
import logging

from motor.motor_asyncio import AsyncIOMotorClient

from country_seeder.config import settings
from country_seeder.countries.loader import seed_from_snapshot
from country_seeder.errors import SeederError
from country_seeder.logging_config import setup_logging

logger = logging.getLogger(__name__)


async def seed() -> bool:
    client = AsyncIOMotorClient(settings.MONGODB_URI)
    collection = client[settings.DATABASE_NAME][settings.COLLECTION_NAME]

    try:
        await seed_from_snapshot(settings.SNAPSHOT_PATH, collection)
    except SeederError as exc:
        logger.error("Seeding '%s' failed: %s", settings.DATABASE_NAME, exc)
        return False
    finally:
        client.close()
    return True


def main() -> None:
    setup_logging(settings.LOG_LEVEL)
    asyncio.run(seed())


if __name__ == "__main__":
    main()
