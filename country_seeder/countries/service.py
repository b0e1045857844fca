import re
from typing import Optional

from country_seeder.countries.models import Country
from country_seeder.database import get_collection


async def list_countries(region: Optional[str] = None) -> list[Country]:
    """Return seeded countries sorted by name, optionally limited to one region.

    Region matching is exact but case-insensitive, so "asia" finds "Asia".
    The user input is escaped before it goes into $regex.
    """
    query: dict = {}
    if region:
        query["region"] = {"$regex": f"^{re.escape(region.strip())}$", "$options": "i"}

    # {"_id": 0} keeps MongoDB's ObjectId out of the API response
    cursor = get_collection().find(query, {"_id": 0}).sort("name", 1)
    results = await cursor.to_list(length=None)
    return [Country(**doc) for doc in results]


async def get_country_by_name(name: str) -> Optional[Country]:
    doc = await get_collection().find_one({"name": name}, {"_id": 0})
    return Country(**doc) if doc else None
