"""
Search filtering over the record collection.
"""

from collections.abc import Iterable

from ..models.records import Record


def record_matches(record: Record, query: str) -> bool:
    """Check a record against an already lower-cased query."""
    if query in record.name.lower():
        return True
    return any(query in keyword.lower() for keyword in record.keywords)


def filter_records(records: Iterable[Record], query: str) -> list[Record]:
    """Return the records matching ``query``, in their original order.

    Matching is case-insensitive against the name or any single keyword.
    An empty query matches everything.
    """
    needle = query.lower()
    return [record for record in records if record_matches(record, needle)]
