"""Whole-file JSON persistence for the local stores."""

import json
import logging
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class StorageErrorKind(StrEnum):
    ABSENT = "absent"
    CORRUPT = "corrupt"


class StorageWriteFailed(Exception):
    """Raised when a store cannot write its backing file."""

    def __init__(self, path: str | Path, reason: str):
        super().__init__(f"Could not write {path}: {reason}")
        self.path = str(path)


@dataclass(frozen=True)
class ReadResult:
    """Outcome of reading a JSON file: a value, or why there is none."""

    value: Any = None
    error: StorageErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def value_or(self, default: Any) -> Any:
        return self.value if self.ok else default


def read_json(path: str | Path) -> ReadResult:
    """Read and parse a JSON file without raising."""
    path = Path(path)
    if not path.exists():
        return ReadResult(error=StorageErrorKind.ABSENT)
    try:
        with open(path, encoding="utf-8") as f:
            return ReadResult(value=json.load(f))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Failed to read %s: %s", path, e)
        return ReadResult(error=StorageErrorKind.CORRUPT)


def write_json(path: str | Path, data: Any) -> None:
    """Overwrite a file with pretty-printed JSON."""
    path = Path(path)
    try:
        if path.parent != Path("."):
            path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
    except OSError as e:
        logger.error("Failed to write %s: %s", path, e)
        raise StorageWriteFailed(path, str(e)) from e
