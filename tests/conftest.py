"""Shared pytest fixtures for searchmoji tests."""

import json
from pathlib import Path

import pytest

from searchmoji.models.records import Record
from test_fixtures import FakeClipboard, ManualScheduler

SAMPLE_PAYLOAD = [
    {"emoji": "😀", "name": "grinning", "keywords": ["happy"]},
    {"emoji": "😂", "name": "joy", "keywords": ["laugh", "happy"]},
    {"emoji": "🐍", "name": "snake", "keywords": ["python", "reptile"]},
    {"emoji": "🔥", "name": "Fire", "keywords": ["HOT", "lit"]},
]


@pytest.fixture
def sample_records() -> tuple[Record, ...]:
    return tuple(Record.from_dict(item) for item in SAMPLE_PAYLOAD)


@pytest.fixture
def records_file(tmp_path: Path) -> Path:
    """A JSON payload file holding the sample records."""
    path = tmp_path / "emojis.json"
    path.write_text(json.dumps(SAMPLE_PAYLOAD), encoding="utf-8")
    return path


@pytest.fixture
def bad_records_file(tmp_path: Path) -> Path:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    return path


@pytest.fixture
def fake_clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def failing_clipboard() -> FakeClipboard:
    return FakeClipboard(fail=True)


@pytest.fixture
def manual_scheduler() -> ManualScheduler:
    return ManualScheduler()
