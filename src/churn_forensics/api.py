"""Public API: fold a commit stream into repository statistics in one call.

Example:
    >>> from churn_forensics import analyze
    >>> result = analyze(commits)
    >>> result.repository.get("src/main.py").number_of_commits
    3
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from .logging_config import get_logger
from .miner import Commit, CommitStatistics, ReportLog, RepositoryStatistics, log_commits

logger = get_logger(__name__)


@dataclass
class MinerResult:
    """Everything aggregated from one commit stream."""

    repository: RepositoryStatistics
    commit_statistics: CommitStatistics
    report: ReportLog


def analyze(commits: Iterable[Commit], log: Optional[ReportLog] = None) -> MinerResult:
    """Build per-file and repository-wide statistics for ``commits``.

    Args:
        commits: Commit records in the miner's order (oldest or newest first)
        log: Collector for the summary lines; a new one is created if omitted

    Returns:
        MinerResult with the file index, the totals and the filled report
    """
    commits = list(commits)
    if log is None:
        log = ReportLog()

    repository = RepositoryStatistics().add_all(commits)
    commit_statistics = log_commits(commits, log)

    logger.debug(
        "Analyzed %d commit records across %d files", len(commits), len(repository)
    )
    return MinerResult(repository=repository, commit_statistics=commit_statistics, report=log)
