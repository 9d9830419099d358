"""Data model for a single file change mined from version control."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Path used on the side of a change where the file does not exist
NO_FILE_NAME = "/dev/null"


class ChangeType(str, Enum):
    """How a commit changed the path of the file it touched."""

    ADD = "ADD"
    DELETE = "DELETE"
    RENAME = "RENAME"
    MODIFY = "MODIFY"


def classify(old_path: str, new_path: str) -> ChangeType:
    """Derive the change type from the two sides of a file change.

    The result depends only on the two paths:

    - ADD: the file did not exist before (old side is ``NO_FILE_NAME``)
    - DELETE: the file does not exist afterwards (new side is ``NO_FILE_NAME``)
    - RENAME: both sides exist and differ
    - MODIFY: both sides are equal
    """
    if old_path == new_path:
        return ChangeType.MODIFY
    if old_path == NO_FILE_NAME:
        return ChangeType.ADD
    if new_path == NO_FILE_NAME:
        return ChangeType.DELETE
    return ChangeType.RENAME


@dataclass
class Commit:
    """One file touched by one revision.

    The miner creates a record per (revision, file) pair and accumulates the
    line counts of every hunk before handing it to the statistics classes.
    """

    revision_id: str
    author: str
    time: int  # unix seconds
    added_lines: int = 0
    deleted_lines: int = 0
    old_path: str = ""
    new_path: str = ""

    def add_lines(self, count: int) -> Commit:
        self.added_lines += count
        return self

    def delete_lines(self, count: int) -> Commit:
        self.deleted_lines += count
        return self

    def set_old_path(self, path: str) -> Commit:
        self.old_path = path
        return self

    def set_new_path(self, path: str) -> Commit:
        self.new_path = path
        return self

    @property
    def change_type(self) -> ChangeType:
        return classify(self.old_path, self.new_path)

    @property
    def is_add(self) -> bool:
        return self.change_type is ChangeType.ADD

    @property
    def is_delete(self) -> bool:
        return self.change_type is ChangeType.DELETE

    @property
    def is_move(self) -> bool:
        return self.change_type is ChangeType.RENAME

    @property
    def is_modify(self) -> bool:
        return self.change_type is ChangeType.MODIFY

    @property
    def file_name(self) -> str:
        """Name of the file after this change, or before it for deletions."""
        if self.new_path == NO_FILE_NAME:
            return self.old_path
        return self.new_path

    @property
    def absolute_churn(self) -> int:
        return self.added_lines + self.deleted_lines
