"""Tests for record parsing and loading."""

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from searchmoji.config.constants import BUNDLED_DATA_FILE
from searchmoji.exceptions import RecordFormatError, RecordLoadError
from searchmoji.models.records import Record, parse_records
from searchmoji.services.record_source import fetch_records, load_records, read_payload


class TestRecord:
    def test_from_dict_with_emoji_key(self):
        record = Record.from_dict({"emoji": "😀", "name": "grinning", "keywords": ["happy"]})
        assert record == Record("😀", "grinning", ("happy",))

    def test_from_dict_with_symbol_key(self):
        record = Record.from_dict({"symbol": "★", "name": "star"})
        assert record.symbol == "★"
        assert record.keywords == ()

    def test_value_equality(self):
        assert Record("😀", "a", ("b",)) == Record("😀", "a", ("b",))

    def test_immutable(self):
        record = Record("😀", "a")
        with pytest.raises(AttributeError):
            record.name = "b"  # type: ignore[misc]

    @pytest.mark.parametrize(
        "data",
        [
            "not a dict",
            {"name": "missing symbol"},
            {"emoji": "😀"},
            {"emoji": "😀", "name": "x", "keywords": "happy"},
            {"emoji": "😀", "name": "x", "keywords": ["ok", 3]},
        ],
    )
    def test_from_dict_rejects_malformed(self, data):
        with pytest.raises(RecordFormatError):
            Record.from_dict(data)

    def test_to_dict(self):
        assert Record("😀", "grinning", ("happy",)).to_dict() == {
            "emoji": "😀",
            "name": "grinning",
            "keywords": ["happy"],
        }


class TestParseRecords:
    def test_preserves_order(self):
        records = parse_records(
            [
                {"emoji": "b", "name": "second", "keywords": []},
                {"emoji": "a", "name": "first", "keywords": []},
            ]
        )
        assert [r.symbol for r in records] == ["b", "a"]

    def test_rejects_non_array(self):
        with pytest.raises(RecordFormatError):
            parse_records({"emoji": "😀"})

    def test_reports_bad_index(self):
        with pytest.raises(RecordFormatError) as exc_info:
            parse_records([{"emoji": "😀", "name": "ok"}, {"emoji": "😀"}])
        assert exc_info.value.context["index"] == 1


class TestLoadRecords:
    def test_load_from_file(self, records_file):
        records = load_records(str(records_file))
        assert len(records) == 4
        assert records[0].name == "grinning"

    def test_missing_file(self, tmp_path):
        with pytest.raises(RecordLoadError) as exc_info:
            load_records(str(tmp_path / "nope.json"))
        assert exc_info.value.context["source"].endswith("nope.json")

    def test_invalid_json(self, bad_records_file):
        with pytest.raises(RecordLoadError):
            load_records(str(bad_records_file))

    def test_malformed_payload(self, tmp_path):
        path = tmp_path / "shape.json"
        path.write_text(json.dumps({"emoji": "😀"}), encoding="utf-8")
        with pytest.raises(RecordLoadError):
            load_records(str(path))

    def test_bundled_dataset_loads(self):
        records = load_records(str(BUNDLED_DATA_FILE))
        assert len(records) > 50
        assert any(r.symbol == "😀" for r in records)

    @patch("searchmoji.services.record_source.requests.get")
    def test_load_from_url(self, mock_get):
        response = MagicMock()
        response.json.return_value = [{"emoji": "😀", "name": "grinning", "keywords": []}]
        mock_get.return_value = response

        records = load_records("https://example.com/emojis.json")

        assert records == (Record("😀", "grinning"),)
        response.raise_for_status.assert_called_once()
        assert mock_get.call_args.kwargs["timeout"] > 0

    @patch("searchmoji.services.record_source.requests.get")
    def test_url_failure_is_load_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("unreachable")
        with pytest.raises(RecordLoadError) as exc_info:
            read_payload("http://example.com/emojis.json")
        assert exc_info.value.retryable is True

    @patch("searchmoji.services.record_source.requests.get")
    def test_http_error_status(self, mock_get):
        response = MagicMock()
        response.raise_for_status.side_effect = requests.HTTPError("404")
        mock_get.return_value = response
        with pytest.raises(RecordLoadError):
            read_payload("http://example.com/emojis.json")

    @pytest.mark.asyncio
    async def test_fetch_records_async(self, records_file):
        records = await fetch_records(str(records_file))
        assert len(records) == 4


class TestHostilePayloads:
    def test_deeply_nested_json_is_load_error(self, tmp_path):
        path = tmp_path / "nested.json"
        path.write_text("[" * 100000 + "]" * 100000, encoding="utf-8")
        with pytest.raises(RecordLoadError) as exc_info:
            read_payload(str(path))
        assert "nested too deeply" in exc_info.value.message
