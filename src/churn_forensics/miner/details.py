"""Commit-level details of one file, resolved from its outbound link."""

from __future__ import annotations

from dataclasses import dataclass

from .file_stats import FileStatistics
from .repository import RepositoryStatistics


@dataclass(frozen=True)
class CommitRow:
    commit_id: str
    author: str
    added_lines: int
    deleted_lines: int


@dataclass
class ChurnSeries:
    """Added and deleted lines per commit, aligned by index."""

    commit_ids: list[str]
    added: list[int]
    deleted: list[int]

    def __len__(self) -> int:
        return len(self.commit_ids)


class FileDetails:
    """Resolves a ``fileName.<hash>`` link and exposes the file's commit table."""

    def __init__(self, link: str, repository: RepositoryStatistics):
        self.link = link
        self.file_statistics: FileStatistics = repository.get_by_link(link)

    @classmethod
    def for_file(cls, file_statistics: FileStatistics) -> FileDetails:
        """Details of a file already looked up by name, bypassing the hash index."""
        details = cls.__new__(cls)
        details.link = file_statistics.link
        details.file_statistics = file_statistics
        return details

    @property
    def display_name(self) -> str:
        return f"Details for {self.file_statistics.file_name}"

    def rows(self) -> list[CommitRow]:
        fs = self.file_statistics
        return [
            CommitRow(
                commit_id=commit_id,
                author=fs.get_author(commit_id),
                added_lines=fs.get_added_lines(commit_id),
                deleted_lines=fs.get_deleted_lines(commit_id),
            )
            for commit_id in fs.commits
        ]

    def churn_series(self) -> ChurnSeries:
        fs = self.file_statistics
        commit_ids = fs.commits
        return ChurnSeries(
            commit_ids=commit_ids,
            added=[fs.added_lines_of_commit[c] for c in commit_ids],
            deleted=[fs.deleted_lines_of_commit[c] for c in commit_ids],
        )
