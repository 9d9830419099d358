"""Read commit records dumped by an external miner."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..exceptions import InputError, InvalidCommitRecordError
from ..logging_config import get_logger
from .models import Commit

logger = get_logger(__name__)

_REQUIRED = (("revision_id", str), ("author", str), ("time", int))
_OPTIONAL = (
    ("added_lines", int, 0),
    ("deleted_lines", int, 0),
    ("old_path", str, ""),
    ("new_path", str, ""),
)


def load_commits(path: Path) -> list[Commit]:
    """Load a JSON array of commit records from ``path``.

    Each record is an object with ``revision_id``, ``author`` and ``time``;
    ``added_lines``, ``deleted_lines``, ``old_path`` and ``new_path`` are
    optional and default like a freshly constructed :class:`Commit`.

    Raises:
        InputError: If the file cannot be read or is not a JSON array
        InvalidCommitRecordError: If a record is malformed
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise InputError(f"Cannot read commit records from {path}", details={"reason": str(e)})

    if not isinstance(data, list):
        raise InputError(f"Expected a JSON array of commit records in {path}")

    commits = [parse_record(index, record) for index, record in enumerate(data)]
    logger.debug("Loaded %d commit records from %s", len(commits), path)
    return commits


def parse_record(index: int, record: Any) -> Commit:
    if not isinstance(record, dict):
        raise InvalidCommitRecordError(index, "record is not an object")

    values: dict[str, Any] = {}
    for key, expected in _REQUIRED:
        if key not in record:
            raise InvalidCommitRecordError(index, f"missing '{key}'")
        values[key] = _check_type(index, key, record[key], expected)
    for key, expected, default in _OPTIONAL:
        values[key] = _check_type(index, key, record.get(key, default), expected)

    return Commit(**values)


def _check_type(index: int, key: str, value: Any, expected: type) -> Any:
    # bool is an int subclass but never a valid count or timestamp
    if isinstance(value, bool) or not isinstance(value, expected):
        raise InvalidCommitRecordError(
            index, f"'{key}' must be {expected.__name__}, got {type(value).__name__}"
        )
    return value
