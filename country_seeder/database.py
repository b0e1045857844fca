"""MongoDB connection lifecycle management.

Uses a module-level singleton client. Call connect_db() at startup
(the FastAPI lifespan or an entry-point script) before using get_database().
"""

from typing import Optional

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)

from country_seeder.config import settings

client: Optional[AsyncIOMotorClient] = None


def get_database() -> AsyncIOMotorDatabase:
    if client is None:
        raise RuntimeError("Database client is not initialized. Call connect_db() first.")
    return client[settings.DATABASE_NAME]


def get_collection() -> AsyncIOMotorCollection:
    """Return the collection the seeder writes to."""
    return get_database()[settings.COLLECTION_NAME]


async def connect_db() -> None:
    global client
    client = AsyncIOMotorClient(settings.MONGODB_URI)


async def disconnect_db() -> None:
    global client
    if client:
        client.close()
        client = None
