"""
Record model: one searchable symbol with its display name and keyword tags.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..exceptions import RecordFormatError


@dataclass(frozen=True)
class Record:
    """A searchable symbol entry. Equality is by value; duplicates are allowed."""

    symbol: str
    name: str
    keywords: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Record:
        """Build a record from one payload object.

        The symbol may be given as ``emoji`` or ``symbol``.

        Raises:
            RecordFormatError: If a field is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise RecordFormatError("Record must be an object", got=type(data).__name__)

        symbol = data.get("emoji", data.get("symbol"))
        name = data.get("name")
        keywords = data.get("keywords", [])

        if not isinstance(symbol, str):
            raise RecordFormatError("Record symbol must be a string", name=name)
        if not isinstance(name, str):
            raise RecordFormatError("Record name must be a string", symbol=symbol)
        if not isinstance(keywords, list) or not all(isinstance(k, str) for k in keywords):
            raise RecordFormatError("Record keywords must be a list of strings", symbol=symbol)

        return cls(symbol=symbol, name=name, keywords=tuple(keywords))

    def to_dict(self) -> dict[str, Any]:
        return {"emoji": self.symbol, "name": self.name, "keywords": list(self.keywords)}


def parse_records(payload: Any) -> tuple[Record, ...]:
    """Parse a JSON-array payload into records, preserving order.

    Raises:
        RecordFormatError: If the payload is not an array or any element is malformed.
    """
    if not isinstance(payload, list):
        raise RecordFormatError("Record payload must be a JSON array", got=type(payload).__name__)

    records = []
    for index, item in enumerate(payload):
        try:
            records.append(Record.from_dict(item))
        except RecordFormatError as e:
            raise RecordFormatError(e.message, index=index, **e.context) from e
    return tuple(records)
