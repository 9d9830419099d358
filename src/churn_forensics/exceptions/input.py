"""Input exceptions: malformed links and miner records."""

from .base import ChurnForensicsError


class InputError(ChurnForensicsError):
    """Base class for data handed in from outside the core."""

    pass


class InvalidFileLinkError(InputError):
    """Raised when a file link does not follow the ``fileName.<hash>`` encoding."""

    def __init__(self, link: str, reason: str):
        super().__init__(f"Invalid file link: {link}", details={"link": link, "reason": reason})
        self.link = link
        self.reason = reason


class InvalidCommitRecordError(InputError):
    """Raised when a miner record cannot be turned into a Commit."""

    def __init__(self, index: int, reason: str):
        super().__init__(
            f"Invalid commit record at index {index}",
            details={"index": str(index), "reason": reason},
        )
        self.index = index
        self.reason = reason
