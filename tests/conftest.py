"""Shared test fixtures for Churn Forensics tests."""

import json

import pytest

from churn_forensics.miner import NO_FILE_NAME, Commit


def make_commit(
    revision_id: str,
    author: str = "author",
    time: int = 0,
    added: int = 0,
    deleted: int = 0,
    old_path: str = "",
    new_path: str = "",
) -> Commit:
    """Create a commit with accumulated line counts."""
    commit = Commit(revision_id, author, time)
    commit.add_lines(added).delete_lines(deleted)
    commit.set_old_path(old_path).set_new_path(new_path)
    return commit


@pytest.fixture
def history():
    """Small history: add, two edits, a rename and a delete."""
    return [
        make_commit("r1", "alice", 100, 10, 0, NO_FILE_NAME, "src/app.py"),
        make_commit("r1", "alice", 100, 5, 0, NO_FILE_NAME, "README.md"),
        make_commit("r2", "bob", 200, 3, 2, "src/app.py", "src/app.py"),
        make_commit("r3", "alice", 300, 1, 1, "src/app.py", "src/app.py"),
        make_commit("r4", "carol", 400, 0, 0, "README.md", "docs/README.md"),
        make_commit("r5", "bob", 500, 0, 15, "src/app.py", NO_FILE_NAME),
    ]


@pytest.fixture
def records_file(tmp_path, history):
    """The history written as a miner JSON dump."""
    records = [
        {
            "revision_id": c.revision_id,
            "author": c.author,
            "time": c.time,
            "added_lines": c.added_lines,
            "deleted_lines": c.deleted_lines,
            "old_path": c.old_path,
            "new_path": c.new_path,
        }
        for c in history
    ]
    path = tmp_path / "commits.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    return path
