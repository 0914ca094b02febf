"""Load job listings from a comma-delimited text source.

The format is deliberately naive: one header row, one record per line, values split
on every comma. Quoted fields are not supported, so a comma inside a value shifts
the remaining columns.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

import requests

from core.records import JobRecord
from core.settings import get_settings

logger = logging.getLogger(__name__)

DELIMITER = ","


class ListingsUnavailable(RuntimeError):
    """The listings source could not be retrieved."""


def _split(line: str) -> List[str]:
    return [part.strip() for part in line.split(DELIMITER)]


def parse_listings(text: str) -> List[JobRecord]:
    """Parse delimited text into records, one per non-header line.

    Args:
        text: Raw file contents. The first line holds the headers.

    Returns:
        Records in source order. Short rows are padded with empty strings and
        surplus values are dropped. Empty input yields an empty list.
    """
    text = (text or "").strip()
    if not text:
        return []
    lines = text.split("\n")
    headers = _split(lines[0])
    records = [JobRecord.from_row(i, headers, _split(ln)) for i, ln in enumerate(lines[1:])]
    logger.debug("Parsed %d job entries.", len(records))
    return records


def _is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def fetch_listings_text(source: str, timeout: Optional[float] = None) -> str:
    """Return the raw text behind `source`, a file path or an http(s) URL."""
    if timeout is None:
        timeout = get_settings().fetch_timeout
    logger.info("Fetching listings from %s", source)
    if _is_url(source):
        try:
            r = requests.get(source, timeout=timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            raise ListingsUnavailable(f"could not fetch {source}: {e}") from e
        return r.text
    try:
        return Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ListingsUnavailable(f"could not read {source}: {e}") from e


def load_listings(source: Optional[str] = None, timeout: Optional[float] = None) -> List[JobRecord]:
    """Fetch and parse listings. Any retrieval failure yields an empty list."""
    source = source or get_settings().listings_source
    try:
        text = fetch_listings_text(source, timeout=timeout)
    except ListingsUnavailable as e:
        logger.warning("Error fetching listings: %s", e)
        return []
    records = parse_listings(text)
    logger.info("Loaded %d listings from %s", len(records), source)
    return records


async def load_listings_async(source: Optional[str] = None, timeout: Optional[float] = None) -> List[JobRecord]:
    return await asyncio.to_thread(load_listings, source, timeout)
