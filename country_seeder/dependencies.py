"""Request guards for the read-only countries API."""

import hmac

from fastapi import Header, HTTPException

from country_seeder.config import settings


async def verify_api_key(x_api_key: str = Header(...)) -> str:
    """Reject requests to /api/countries whose X-API-Key doesn't match settings.API_KEY."""
    if not hmac.compare_digest(x_api_key, settings.API_KEY):
        raise HTTPException(status_code=401, detail="Invalid API key")
    return x_api_key
