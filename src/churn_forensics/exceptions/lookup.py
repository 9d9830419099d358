"""Lookup exceptions: files and commits that were never observed."""

from typing import Dict, Optional

from .base import ChurnForensicsError


class NotFoundError(ChurnForensicsError, LookupError):
    """Base class for lookups that have no matching accumulator."""

    pass


class FileNotTrackedError(NotFoundError):
    """Raised when no statistics exist for a file name or file hash."""

    def __init__(self, file_name: Optional[str] = None, file_hash: Optional[int] = None):
        details: Dict[str, str] = {}
        if file_name is not None:
            details["file_name"] = file_name
            message = f"No statistics for file: {file_name}"
        else:
            message = f"No file found with hash code {file_hash}"
        if file_hash is not None:
            details["file_hash"] = str(file_hash)

        super().__init__(message, details=details)
        self.file_name = file_name
        self.file_hash = file_hash


class CommitNotFoundError(NotFoundError):
    """Raised when a commit id never touched the given file."""

    def __init__(self, file_name: str, commit_id: str):
        super().__init__(
            f"Commit {commit_id} did not touch {file_name}",
            details={"file_name": file_name, "commit_id": commit_id},
        )
        self.file_name = file_name
        self.commit_id = commit_id
