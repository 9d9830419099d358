"""Tests for the churn-forensics CLI."""

import json

import pytest
from typer.testing import CliRunner

from churn_forensics import __version__
from churn_forensics.cli import app
from churn_forensics.miner.hashing import file_link

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    for key in ("TOP_FILES", "SORT_BY", "SHOW_DELETED", "VERBOSITY", "LOG_FILE"):
        monkeypatch.delenv(f"FORENSICS_{key}", raising=False)


class TestRoot:
    """Test the top-level callback."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_no_command_shows_help(self):
        result = runner.invoke(app, [])
        assert "summary" in result.output

    def test_invalid_config_value(self, tmp_path, records_file):
        path = tmp_path / "bad.toml"
        path.write_text("top_files = 0\n")

        result = runner.invoke(app, ["--config", str(path), "files", str(records_file)])
        assert result.exit_code == 2


class TestSummary:
    """Test the summary command."""

    def test_json(self, records_file):
        result = runner.invoke(app, ["summary", str(records_file), "--json"])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["commits"] == 5
        assert payload["authors"] == 3
        assert payload["files"] == 3
        assert payload["added_lines"] == 19
        assert payload["deleted_lines"] == 18
        assert payload["lines_of_code"] == 1
        assert payload["absolute_churn"] == 37
        assert payload["report"][0] == "-> 5 commits analyzed"

    def test_rich_output_contains_report(self, records_file):
        result = runner.invoke(app, ["summary", str(records_file)])

        assert result.exit_code == 0
        assert "-> 5 commits analyzed" in result.stdout
        assert "-> 1 DELETE commits" in result.stdout
        assert "Repository Totals" in result.stdout

    def test_missing_input(self, tmp_path):
        result = runner.invoke(app, ["summary", str(tmp_path / "missing.json")])
        assert result.exit_code != 0

    def test_malformed_input(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('[{"revision_id": "1"}]')

        result = runner.invoke(app, ["summary", str(path)])
        assert result.exit_code == 1


class TestFiles:
    """Test the files command."""

    def test_sorted_by_churn(self, records_file):
        result = runner.invoke(app, ["files", str(records_file), "--json"])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert [entry["file"] for entry in payload] == [
            "src/app.py",
            "README.md",
            "docs/README.md",
        ]
        assert payload[0]["absolute_churn"] == 32
        assert payload[0]["deleted"] is True
        assert payload[0]["link"] == file_link("src/app.py")
        assert payload[2]["previous_names"] == ["README.md"]

    def test_sort_and_top(self, records_file):
        result = runner.invoke(
            app, ["files", str(records_file), "--sort", "name", "--top", "2", "--json"]
        )

        payload = json.loads(result.stdout)
        assert [entry["file"] for entry in payload] == ["README.md", "docs/README.md"]

    def test_config_file_sets_defaults(self, tmp_path, records_file):
        path = tmp_path / "custom.toml"
        path.write_text("top_files = 1\nshow_deleted = false\n")

        result = runner.invoke(app, ["--config", str(path), "files", str(records_file), "--json"])

        payload = json.loads(result.stdout)
        assert [entry["file"] for entry in payload] == ["README.md"]

    def test_rich_table(self, records_file):
        result = runner.invoke(app, ["files", str(records_file)])

        assert result.exit_code == 0
        assert "Files (3 of 3)" in result.stdout


class TestShow:
    """Test the show command."""

    def test_by_name(self, records_file):
        result = runner.invoke(app, ["show", str(records_file), "src/app.py", "--json"])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["file"] == "src/app.py"
        assert [row["commit_id"] for row in payload["commits"]] == ["r1", "r2", "r3", "r5"]
        assert payload["commits"][1] == {
            "commit_id": "r2",
            "author": "bob",
            "added_lines": 3,
            "deleted_lines": 2,
        }

    def test_by_link(self, records_file):
        link = file_link("docs/README.md")
        result = runner.invoke(app, ["show", str(records_file), link, "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["file"] == "docs/README.md"

    def test_unknown_file(self, records_file):
        result = runner.invoke(app, ["show", str(records_file), "nope.py"])
        assert result.exit_code == 1

    def test_unknown_link(self, records_file):
        result = runner.invoke(app, ["show", str(records_file), "fileName.1"])
        assert result.exit_code == 1

    def test_rich_table(self, records_file):
        result = runner.invoke(app, ["show", str(records_file), "src/app.py"])

        assert result.exit_code == 0
        assert "Details for src/app.py" in result.stdout
        assert "deleted in its last change" in result.stdout

    def test_by_name_with_colliding_hash(self, tmp_path):
        records = [
            {"revision_id": "r1", "author": "alice", "time": 100, "added_lines": 1,
             "old_path": "Aa", "new_path": "Aa"},
            {"revision_id": "r2", "author": "bob", "time": 200, "added_lines": 7,
             "old_path": "BB", "new_path": "BB"},
        ]
        path = tmp_path / "colliding.json"
        path.write_text(json.dumps(records))

        result = runner.invoke(app, ["show", str(path), "BB", "--json"])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["file"] == "BB"
        assert payload["commits"] == [
            {"commit_id": "r2", "author": "bob", "added_lines": 7, "deleted_lines": 0}
        ]
