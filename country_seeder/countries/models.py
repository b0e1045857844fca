from typing import Optional

from pydantic import BaseModel, Field


class Country(BaseModel):
    """A country as stored in the countries collection.

    This is the declared shape every seeded document must fit. Fields are
    optional because the source API does not guarantee all four; a field
    the source omits stays unset and is left out of the stored document.
    """

    name: Optional[str] = None  # e.g. "Afghanistan"
    capital: Optional[str] = None  # e.g. "Kabul"
    region: Optional[str] = None  # e.g. "Asia"
    population: Optional[int] = Field(default=None, ge=0)  # e.g. 27657145


class CountryResponse(BaseModel):
    """Response for listing seeded countries."""

    countries: list[Country]
    total: int
