"""Index of per-file statistics for a whole repository."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..exceptions import FileNotTrackedError
from ..logging_config import get_logger
from .file_stats import FileStatistics
from .hashing import parse_file_link
from .models import Commit

logger = get_logger(__name__)


class RepositoryStatistics:
    """Maps file names to their :class:`FileStatistics`.

    Files are never removed: a file deleted in a later revision keeps its
    history. Build the index with :meth:`add_all`; afterwards treat it as
    read-only (concurrent readers are fine, writers must be serialized by
    the caller).
    """

    def __init__(self) -> None:
        self._files: dict[str, FileStatistics] = {}
        self._by_hash: dict[int, FileStatistics] = {}

    def add_all(self, commits: Iterable[Commit]) -> RepositoryStatistics:
        """Route every commit to the statistics of the file it touched."""
        count = 0
        created = 0
        for commit in commits:
            file_name = commit.file_name
            statistics = self._files.get(file_name)
            if statistics is None:
                statistics = FileStatistics(commit)
                self._files[file_name] = statistics
                # hash collisions: the first file seen keeps the link
                self._by_hash.setdefault(statistics.file_hash, statistics)
                created += 1
            else:
                statistics.accept(commit)
            count += 1

        logger.debug(
            "Folded %d commit records into %d new files (%d tracked)",
            count,
            created,
            len(self._files),
        )
        return self

    def get(self, file_name: str) -> FileStatistics:
        try:
            return self._files[file_name]
        except KeyError:
            raise FileNotTrackedError(file_name=file_name) from None

    def get_by_hash(self, file_hash: int) -> FileStatistics:
        """Resolve the numeric hash used in outbound file links."""
        try:
            return self._by_hash[file_hash]
        except KeyError:
            raise FileNotTrackedError(file_hash=file_hash) from None

    def get_by_link(self, link: str) -> FileStatistics:
        return self.get_by_hash(parse_file_link(link))

    def contains(self, file_name: str) -> bool:
        return file_name in self._files

    def all(self) -> list[FileStatistics]:
        """All tracked files in first-seen order."""
        return list(self._files.values())

    @property
    def file_names(self) -> list[str]:
        return list(self._files)

    @property
    def is_empty(self) -> bool:
        return not self._files

    def __contains__(self, file_name: object) -> bool:
        return file_name in self._files

    def __len__(self) -> int:
        return len(self._files)

    def __iter__(self) -> Iterator[FileStatistics]:
        return iter(self._files.values())
