"""Commit mining model and the statistics folded from it."""

from .commit_stats import (
    CommitStatistics,
    count_adds,
    count_changes,
    count_deletes,
    count_moves,
    log_commits,
)
from .details import ChurnSeries, CommitRow, FileDetails
from .file_stats import FileStatistics
from .hashing import FILE_LINK_PREFIX, file_link, file_name_hash, parse_file_link
from .loader import load_commits
from .models import NO_FILE_NAME, ChangeType, Commit, classify
from .report import ReportLog
from .repository import RepositoryStatistics

__all__ = [
    "Commit",
    "ChangeType",
    "NO_FILE_NAME",
    "classify",
    "CommitStatistics",
    "count_changes",
    "count_deletes",
    "count_moves",
    "count_adds",
    "log_commits",
    "FileStatistics",
    "RepositoryStatistics",
    "FileDetails",
    "CommitRow",
    "ChurnSeries",
    "ReportLog",
    "FILE_LINK_PREFIX",
    "file_name_hash",
    "file_link",
    "parse_file_link",
    "load_commits",
]
