"""Reset the countries collection and bulk-insert the projected records.

Two steps, strictly in order: delete everything, then insert everything.
There is no transaction around them, so an insert failure after a
successful delete can leave the collection empty or partially filled.
"""

import logging
from pathlib import Path
from typing import Any, Iterable, Union

from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from country_seeder.countries.models import Country
from country_seeder.countries.transformer import transform_snapshot
from country_seeder.errors import StoreError

logger = logging.getLogger(__name__)


def validate_countries(records: Iterable[dict[str, Any]]) -> list[Country]:
    """Check every record against the Country schema, coercing types."""
    countries = []
    for index, record in enumerate(records):
        try:
            countries.append(Country.model_validate(record))
        except ValidationError as exc:
            raise StoreError(f"Record {index} does not match the country schema: {exc}") from exc
    return countries


async def seed_countries(
    records: Iterable[dict[str, Any]],
    collection: AsyncIOMotorCollection,
) -> list[dict[str, Any]]:
    """Replace the collection contents with ``records``.

    Returns the inserted documents, each with its store-assigned ``_id``.
    """
    records = list(records)

    try:
        deleted = await collection.delete_many({})  # destructive: wipes all existing countries
    except PyMongoError as exc:
        raise StoreError(f"Could not clear '{collection.name}': {exc}") from exc
    logger.info("Removed %d existing countries from '%s'", deleted.deleted_count, collection.name)

    # Validation happens after the delete, matching a schema check at insert time
    countries = validate_countries(records)

    # insert_many rejects an empty batch; an empty snapshot just leaves the collection empty
    if not countries:
        logger.info("No countries to insert into '%s'", collection.name)
        return []

    # exclude_unset keeps source-missing fields out of the document instead of storing null
    documents = [country.model_dump(exclude_unset=True) for country in countries]
    try:
        result = await collection.insert_many(documents)
    except PyMongoError as exc:
        raise StoreError(f"Could not insert countries into '{collection.name}': {exc}") from exc

    for document, inserted_id in zip(documents, result.inserted_ids):
        document["_id"] = inserted_id
    logger.info("Seeded %d countries into '%s'", len(documents), collection.name)
    return documents


async def seed_from_snapshot(
    path: Union[str, Path],
    collection: AsyncIOMotorCollection,
) -> list[dict[str, Any]]:
    """Transform the cached snapshot and seed the collection with it."""
    return await seed_countries(transform_snapshot(path), collection)
