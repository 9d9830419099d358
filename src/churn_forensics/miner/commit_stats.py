"""Repository-wide totals folded from a sequence of commits."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .models import ChangeType, Commit
from .report import ReportLog


@dataclass(frozen=True)
class CommitStatistics:
    """Totals over a sequence of commit records.

    Built once with :meth:`from_commits`; a changed sequence needs a new fold.
    """

    added_lines: int = 0
    deleted_lines: int = 0
    author_count: int = 0
    commit_count: int = 0  # distinct revision ids
    modify_count: int = 0
    rename_count: int = 0
    delete_count: int = 0
    add_count: int = 0

    @classmethod
    def from_commits(cls, commits: Iterable[Commit]) -> CommitStatistics:
        commits = list(commits)
        return cls(
            added_lines=sum(c.added_lines for c in commits),
            deleted_lines=sum(c.deleted_lines for c in commits),
            author_count=len({c.author for c in commits}),
            commit_count=len({c.revision_id for c in commits}),
            modify_count=count_changes(commits),
            rename_count=count_moves(commits),
            delete_count=count_deletes(commits),
            add_count=count_adds(commits),
        )

    @property
    def lines_of_code(self) -> int:
        """Net change in lines; negative when more lines were removed."""
        return self.added_lines - self.deleted_lines

    @property
    def absolute_churn(self) -> int:
        return self.added_lines + self.deleted_lines


def _count(commits: Iterable[Commit], change_type: ChangeType) -> int:
    return sum(1 for c in commits if c.change_type is change_type)


def count_changes(commits: Iterable[Commit]) -> int:
    """Number of records that modified a file in place."""
    return _count(commits, ChangeType.MODIFY)


def count_deletes(commits: Iterable[Commit]) -> int:
    return _count(commits, ChangeType.DELETE)


def count_moves(commits: Iterable[Commit]) -> int:
    """Number of records that renamed or moved a file."""
    return _count(commits, ChangeType.RENAME)


def count_adds(commits: Iterable[Commit]) -> int:
    return _count(commits, ChangeType.ADD)


def log_commits(commits: Sequence[Commit], log: ReportLog) -> CommitStatistics:
    """Write a summary of the commits to the report log.

    Classification lines are only written for non-zero counts. The last line
    reports the net lines of code (added minus deleted).
    """
    statistics = CommitStatistics.from_commits(commits)

    log.log_info("-> %d commits analyzed", statistics.commit_count)
    for label, count in (
        (ChangeType.MODIFY, statistics.modify_count),
        (ChangeType.RENAME, statistics.rename_count),
        (ChangeType.DELETE, statistics.delete_count),
    ):
        if count > 0:
            log.log_info("-> %d %s commits", count, label.value)
    log.log_info("-> %d lines added", statistics.added_lines)
    log.log_info("-> %d lines of code changed (net)", statistics.lines_of_code)

    return statistics
