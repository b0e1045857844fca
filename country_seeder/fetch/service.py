import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional, Union

import httpx

from country_seeder.errors import FilesystemError, NetworkError, ParseError

logger = logging.getLogger(__name__)


async def fetch_countries(
    url: str,
    client: Optional[httpx.AsyncClient] = None,
    timeout: Optional[float] = None,
) -> list[Any]:
    """GET the countries endpoint and return the parsed JSON array.

    A single request, no retries. Callers may pass their own client (tests
    inject one backed by httpx.MockTransport); otherwise a short-lived client
    is opened for this one call.
    """
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                response = await own_client.get(url)
        else:
            response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise NetworkError(f"{url} returned HTTP {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        raise NetworkError(f"Request to {url} failed: {exc}") from exc

    try:
        payload = response.json()
    except ValueError as exc:
        raise ParseError(f"Response from {url} is not valid JSON: {exc}") from exc

    # The transform stage expects an array of country objects
    if not isinstance(payload, list):
        raise ParseError(f"Response from {url} is a JSON {type(payload).__name__}, expected an array")
    return payload


def _default_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_snapshot(payload: list[Any], path: Union[str, Path]) -> Path:
    """Write the fetched payload to the snapshot file.

    The JSON is written to a temp file next to the destination and then
    moved over it with os.replace, so readers only ever see the previous
    snapshot or the complete new one. A failed write leaves the old file
    (or no file) in place.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False)
            # mkstemp creates the file 0600; give the snapshot the usual umask-based mode
            os.chmod(tmp_name, _default_file_mode())
            os.replace(tmp_name, path)
        except Exception:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
    except OSError as exc:
        raise FilesystemError(f"Could not write snapshot to {path}: {exc}") from exc
    return path


async def fetch_and_cache(
    url: str,
    path: Union[str, Path],
    client: Optional[httpx.AsyncClient] = None,
    timeout: Optional[float] = None,
) -> int:
    """Fetch the countries array and cache it verbatim. Returns the record count."""
    logger.info("Fetching countries from %s", url)
    payload = await fetch_countries(url, client=client, timeout=timeout)
    written = write_snapshot(payload, path)
    logger.info("Wrote %d countries to %s", len(payload), written)
    return len(payload)
