"""Data models for searchmoji."""

from .records import Record, parse_records

__all__ = ["Record", "parse_records"]
