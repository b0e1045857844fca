import json
import logging
from pathlib import Path
from typing import Any, Iterable, Union

from country_seeder.errors import ParseError

logger = logging.getLogger(__name__)

# The only fields kept from each API record
COUNTRY_FIELDS = ("name", "capital", "region", "population")


def load_snapshot(path: Union[str, Path]) -> list[dict[str, Any]]:
    """Read the cached API response back into a list of raw country dicts."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError as exc:
        raise ParseError(f"Snapshot {path} does not exist; run the fetch step first") from exc
    except json.JSONDecodeError as exc:
        raise ParseError(f"Snapshot {path} is not valid JSON: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ParseError(f"Snapshot {path} is not valid UTF-8 JSON: {exc}") from exc
    except OSError as exc:
        raise ParseError(f"Could not read snapshot {path}: {exc}") from exc

    if not isinstance(payload, list):
        raise ParseError(f"Snapshot {path} holds a JSON {type(payload).__name__}, expected an array")
    for index, raw in enumerate(payload):
        if not isinstance(raw, dict):
            raise ParseError(f"Snapshot {path} entry {index} is not a JSON object")
    return payload


def project_country(raw: dict[str, Any]) -> dict[str, Any]:
    """Keep only the country fields present in ``raw``.

    A field missing from the source is left out of the projection rather
    than filled with a default, so it is also absent from the stored document.
    """
    return {field: raw[field] for field in COUNTRY_FIELDS if field in raw}


def transform_countries(raw_records: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    # One output per input, in input order
    return [project_country(raw) for raw in raw_records]


def transform_snapshot(path: Union[str, Path]) -> list[dict[str, Any]]:
    countries = transform_countries(load_snapshot(path))
    logger.info("Projected %d countries from %s", len(countries), path)
    return countries
