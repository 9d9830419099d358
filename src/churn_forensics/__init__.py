"""
Churn Forensics - code churn and change-risk statistics from commit history

Folds the per-file change records produced by a version-control miner into
per-file churn histories, author attribution, rename/delete tracking and
repository-wide totals.
"""

__version__ = "0.1.0"

from .api import MinerResult, analyze
from .miner import (
    ChangeType,
    Commit,
    CommitStatistics,
    FileStatistics,
    ReportLog,
    RepositoryStatistics,
)

__all__ = [
    "analyze",  # Main entry point
    "MinerResult",
    "Commit",
    "ChangeType",
    "CommitStatistics",
    "FileStatistics",
    "RepositoryStatistics",
    "ReportLog",
]
