"""Per-file churn history keyed by commit id."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Optional

from ..exceptions import CommitNotFoundError
from .hashing import file_link, file_name_hash
from .models import ChangeType, Commit


class FileStatistics:
    """Accumulates every commit that touched one file.

    Commit ids are kept in the order they were first seen. A revision that
    reaches the file through several records (one per hunk) keeps a single
    slot whose line counts add up.

    Instances are created by :class:`RepositoryStatistics` from the first
    commit of the file, so a FileStatistics never exists without history.
    """

    def __init__(self, commit: Commit):
        self._file_name = commit.file_name
        self._file_hash = file_name_hash(self._file_name)
        self._commits: list[str] = []
        self._added_lines: dict[str, int] = {}
        self._deleted_lines: dict[str, int] = {}
        self._authors: dict[str, str] = {}
        self._creation_time: Optional[int] = None
        self._last_modification_time: Optional[int] = None
        self._deleted = False
        self._previous_names: list[str] = []
        self.accept(commit)

    def accept(self, commit: Commit) -> None:
        commit_id = commit.revision_id
        if commit_id not in self._added_lines:
            self._commits.append(commit_id)
            self._added_lines[commit_id] = 0
            self._deleted_lines[commit_id] = 0
        self._added_lines[commit_id] += commit.added_lines
        self._deleted_lines[commit_id] += commit.deleted_lines
        self._authors[commit_id] = commit.author

        # the latest change in time decides, whatever order records arrive in
        is_latest = (
            self._last_modification_time is None or commit.time >= self._last_modification_time
        )
        if self._creation_time is None or commit.time < self._creation_time:
            self._creation_time = commit.time
        if is_latest:
            self._last_modification_time = commit.time

        change_type = commit.change_type
        if is_latest:
            self._deleted = change_type is ChangeType.DELETE
        if change_type is ChangeType.RENAME and commit.old_path not in self._previous_names:
            self._previous_names.append(commit.old_path)

    # ── Identity ──────────────────────────────────────────────────────────────

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def file_hash(self) -> int:
        return self._file_hash

    @property
    def link(self) -> str:
        return file_link(self._file_name)

    # ── Per-commit series ─────────────────────────────────────────────────────

    @property
    def commits(self) -> list[str]:
        """Commit ids that touched this file, in observed order."""
        return list(self._commits)

    def get_added_lines(self, commit_id: str) -> int:
        return self._lookup(self._added_lines, commit_id)

    def get_deleted_lines(self, commit_id: str) -> int:
        return self._lookup(self._deleted_lines, commit_id)

    def get_author(self, commit_id: str) -> str:
        return self._lookup(self._authors, commit_id)

    @property
    def added_lines_of_commit(self) -> Mapping[str, int]:
        return MappingProxyType(self._added_lines)

    @property
    def deleted_lines_of_commit(self) -> Mapping[str, int]:
        return MappingProxyType(self._deleted_lines)

    @property
    def author_of_commit(self) -> Mapping[str, str]:
        return MappingProxyType(self._authors)

    def _lookup(self, mapping, commit_id):
        try:
            return mapping[commit_id]
        except KeyError:
            raise CommitNotFoundError(self._file_name, commit_id) from None

    # ── Summary ───────────────────────────────────────────────────────────────

    @property
    def number_of_commits(self) -> int:
        return len(self._commits)

    @property
    def authors(self) -> set[str]:
        return set(self._authors.values())

    @property
    def number_of_authors(self) -> int:
        return len(self.authors)

    @property
    def total_added_lines(self) -> int:
        return sum(self._added_lines.values())

    @property
    def total_deleted_lines(self) -> int:
        return sum(self._deleted_lines.values())

    @property
    def lines_of_code(self) -> int:
        return self.total_added_lines - self.total_deleted_lines

    @property
    def absolute_churn(self) -> int:
        return self.total_added_lines + self.total_deleted_lines

    @property
    def creation_time(self) -> int:
        return self._creation_time

    @property
    def last_modification_time(self) -> int:
        return self._last_modification_time

    @property
    def is_deleted(self) -> bool:
        """True when the most recently accepted change removed the file."""
        return self._deleted

    @property
    def previous_names(self) -> list[str]:
        return list(self._previous_names)

    def __repr__(self) -> str:
        return (
            f"FileStatistics({self._file_name!r}, commits={self.number_of_commits}, "
            f"churn={self.absolute_churn})"
        )
