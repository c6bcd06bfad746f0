"""
Reading the initial record collection.

The source is either a filesystem path or an http(s) URL pointing at a JSON
array of ``{"emoji", "name", "keywords"}`` objects.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

import requests

from ..config.constants import HTTP_TIMEOUT_SECONDS
from ..exceptions import RecordFormatError, RecordLoadError
from ..models.records import Record, parse_records

logger = logging.getLogger(__name__)


def is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def read_payload(source: str) -> Any:
    """Read and decode the JSON payload from a path or URL.

    Raises:
        RecordLoadError: If the source is unreachable or not valid JSON.
    """
    try:
        if is_remote(source):
            response = requests.get(source, timeout=HTTP_TIMEOUT_SECONDS)
            response.raise_for_status()
            return response.json()
        return json.loads(Path(source).expanduser().read_text(encoding="utf-8"))
    except requests.JSONDecodeError as e:
        raise RecordLoadError(f"Record payload is not valid JSON: {e}", source=source) from e
    except requests.RequestException as e:
        raise RecordLoadError(f"Failed to fetch records: {e}", source=source, retryable=True) from e
    except OSError as e:
        raise RecordLoadError(f"Failed to read records: {e}", source=source) from e
    except RecursionError as e:
        raise RecordLoadError("Record payload is nested too deeply", source=source) from e
    except ValueError as e:
        # json.JSONDecodeError and requests' JSON errors are both ValueErrors
        raise RecordLoadError(f"Record payload is not valid JSON: {e}", source=source) from e


def load_records(source: str) -> tuple[Record, ...]:
    """Load and parse the record collection synchronously.

    Raises:
        RecordLoadError: On any read, decode or format failure.
    """
    payload = read_payload(source)
    try:
        records = parse_records(payload)
    except RecordFormatError as e:
        raise RecordLoadError(f"Malformed record payload: {e}", source=source) from e
    logger.info("Loaded %d records from %s", len(records), source)
    return records


async def fetch_records(source: str) -> tuple[Record, ...]:
    """Load records without blocking the event loop."""
    # Run blocking I/O in thread pool to avoid blocking UI
    return await asyncio.to_thread(load_records, source)
