"""Exception hierarchy for Churn Forensics."""

from .base import ChurnForensicsError
from .config import ConfigurationError, InvalidConfigError
from .input import InputError, InvalidCommitRecordError, InvalidFileLinkError
from .lookup import CommitNotFoundError, FileNotTrackedError, NotFoundError

__all__ = [
    "ChurnForensicsError",
    "NotFoundError",
    "FileNotTrackedError",
    "CommitNotFoundError",
    "InputError",
    "InvalidFileLinkError",
    "InvalidCommitRecordError",
    "ConfigurationError",
    "InvalidConfigError",
]
