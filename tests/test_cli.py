"""CLI tests."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from searchmoji import __version__
from searchmoji.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _no_log_file():
    with patch("searchmoji.main.setup_logging") as mock_setup:
        yield mock_setup


class TestCLIBasics:
    def test_cli_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Usage:" in result.stdout

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_invalid_command(self):
        result = runner.invoke(app, ["nonexistent-command"])
        assert result.exit_code != 0

    def test_verbose_sets_debug_logging(self, _no_log_file):
        runner.invoke(app, ["--verbose", "version"])
        _no_log_file.assert_called_once_with("DEBUG")


class TestFindCommand:
    def test_find_table(self, records_file):
        result = runner.invoke(app, ["find", "happy", "--source", str(records_file)])
        assert result.exit_code == 0
        assert "grinning" in result.stdout
        assert "joy" in result.stdout
        assert "snake" not in result.stdout

    def test_find_json(self, records_file):
        result = runner.invoke(app, ["find", "SNAKE", "--source", str(records_file), "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == [
            {"emoji": "🐍", "name": "snake", "keywords": ["python", "reptile"]}
        ]

    def test_find_limit(self, records_file):
        result = runner.invoke(app, ["find", "", "-s", str(records_file), "-n", "1", "--json"])
        assert len(json.loads(result.stdout)) == 1

    def test_find_no_matches(self, records_file):
        result = runner.invoke(app, ["find", "zebra", "--source", str(records_file)])
        assert result.exit_code == 0
        assert "No emojis match" in result.stdout

    def test_find_bad_source_exits_nonzero(self, bad_records_file):
        result = runner.invoke(app, ["find", "x", "--source", str(bad_records_file)])
        assert result.exit_code == 1

    def test_find_uses_env_source(self, records_file, monkeypatch):
        monkeypatch.setenv("SEARCHMOJI_DATA_SOURCE", str(records_file))
        result = runner.invoke(app, ["find", "snake", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)[0]["emoji"] == "🐍"


class TestUICommand:
    def test_ui_launches_app_with_source(self, records_file):
        with patch("searchmoji.ui.app.run_app") as mock_run:
            result = runner.invoke(app, ["ui", "--source", str(records_file)])
        assert result.exit_code == 0
        mock_run.assert_called_once_with(str(records_file))


class TestFindInputHandling:
    def test_find_markup_characters_in_query(self, records_file):
        result = runner.invoke(app, ["find", "[/]", "--source", str(records_file)])
        assert result.exit_code == 0
        assert "No emojis match '[/]'" in result.stdout

    def test_find_markup_characters_in_table_title(self, tmp_path):
        path = tmp_path / "odd.json"
        path.write_text(
            json.dumps([{"emoji": "🔲", "name": "box [/b]", "keywords": []}]), encoding="utf-8"
        )
        result = runner.invoke(app, ["find", "[/b]", "--source", str(path)])
        assert result.exit_code == 0
        assert "[/b]" in result.stdout

    @pytest.mark.parametrize("limit", ["0", "-1"])
    def test_find_rejects_non_positive_limit(self, records_file, limit):
        result = runner.invoke(app, ["find", "", "-s", str(records_file), "-n", limit])
        assert result.exit_code == 2
