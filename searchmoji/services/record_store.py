"""
Holder for the record collection, immutable once loaded.
"""

import logging
from typing import Optional

from ..exceptions import RecordLoadError, StoreAlreadyLoadedError
from ..models.records import Record

logger = logging.getLogger(__name__)


class RecordStore:
    """The session's record collection.

    Empty until the startup load publishes a collection. A failed load leaves
    it empty and records the error; there is no retry.
    """

    def __init__(self) -> None:
        self._records: tuple[Record, ...] = ()
        self._loaded = False
        self._load_error: Optional[RecordLoadError] = None

    @property
    def records(self) -> tuple[Record, ...]:
        return self._records

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def load_error(self) -> Optional[RecordLoadError]:
        return self._load_error

    def __len__(self) -> int:
        return len(self._records)

    def publish(self, records: tuple[Record, ...]) -> None:
        """Publish the loaded collection.

        Raises:
            StoreAlreadyLoadedError: If a collection was already published.
        """
        if self._loaded:
            raise StoreAlreadyLoadedError(count=len(self._records))
        self._records = tuple(records)
        self._loaded = True
        logger.debug("Published %d records", len(self._records))

    def mark_failed(self, error: RecordLoadError) -> None:
        """Record a load failure; the collection stays empty."""
        self._load_error = error
