from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from country_seeder.countries.models import Country, CountryResponse
from country_seeder.countries.service import get_country_by_name, list_countries
from country_seeder.dependencies import verify_api_key

# Read-only view over the seeded collection, for checking a seed run.
# Every route requires a valid X-API-Key header.
router = APIRouter(prefix="/api/countries", tags=["countries"], dependencies=[Depends(verify_api_key)])


@router.get("", response_model=CountryResponse, response_model_exclude_unset=True)
async def list_seeded_countries(
    region: Optional[str] = Query(None),  # e.g. "Asia"
):
    """List every seeded country, optionally filtered by region."""
    countries = await list_countries(region=region or None)
    return CountryResponse(countries=countries, total=len(countries))


@router.get("/{name}", response_model=Country, response_model_exclude_unset=True)
async def get_country(name: str):
    country = await get_country_by_name(name)
    if not country:
        raise HTTPException(status_code=404, detail="Country not found")
    return country
