"""One-shot loading of the raw record document from a path or URL."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import requests

from racechart.data.normalize_inputs import normalize_records
from racechart.data.records import Record

logger = logging.getLogger(__name__)

FETCH_TIMEOUT = 30


def fetch_json(source: str | Path, timeout: float = FETCH_TIMEOUT) -> Any | None:
    """Fetch a JSON document from an http(s) URL or a local file.

    Returns:
        The decoded document, or None when it could not be fetched or decoded.
        Failures are logged; nothing is raised.
    """
    source = str(source)
    try:
        if source.startswith(("http://", "https://")):
            resp = requests.get(source, timeout=timeout)
            resp.raise_for_status()
            return resp.json()
        with open(source, encoding="utf-8") as f:
            return json.load(f)
    except requests.RequestException as e:
        logger.error("fetch failed for %s: %s", source, e)
    except FileNotFoundError:
        logger.error("data file not found: %s", source)
    except (OSError, ValueError) as e:
        logger.exception("could not read %s: %s", source, e)
    return None


def load_records(
    source: str | Path | None, fields: dict[str, str] | None = None
) -> list[Record] | None:
    """Load and normalize the record array found at ``source``.

    Returns None when there is no source, the fetch returned nothing, or the
    document is not an array of records. Callers must not start playback in
    that case.
    """
    if not source:
        logger.error("no data source configured")
        return None
    payload = fetch_json(source)
    if payload is None:
        logger.error("failed to load %s or data is undefined", source)
        return None
    if not isinstance(payload, list):
        logger.error(
            "expected a JSON array of records in %s, got %s",
            source,
            type(payload).__name__,
        )
        return None
    records = normalize_records(payload, fields)
    logger.info("loaded %d records from %s", len(records), source)
    return records
