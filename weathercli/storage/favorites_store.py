"""Persistence for the ordered list of favorite cities."""

import logging
from enum import StrEnum
from pathlib import Path

from weathercli.storage.json_file import (
    ReadResult,
    StorageErrorKind,
    read_json,
    write_json,
)

logger = logging.getLogger(__name__)


class FavoriteOutcome(StrEnum):
    ADDED = "added"
    ALREADY_PRESENT = "already_present"
    REMOVED = "removed"
    NOT_FOUND = "not_found"


class FavoritesStore:
    """Holds the favorites list in memory and flushes it on every change.

    City names are compared exactly: no trimming, no case folding.
    """

    def __init__(self, path: str | Path, cities: list[str] | None = None):
        self.path = Path(path)
        self.cities: list[str] = list(cities) if cities is not None else []

    def read(self) -> ReadResult:
        result = read_json(self.path)
        if not result.ok:
            return result
        raw = result.value
        if not isinstance(raw, list) or not all(isinstance(c, str) for c in raw):
            logger.warning("Favorites file %s is not a list of names", self.path)
            return ReadResult(error=StorageErrorKind.CORRUPT)
        return result

    def load(self) -> list[str]:
        """Replace the in-memory list with the file contents ([] on failure)."""
        result = self.read()
        if result.error == StorageErrorKind.CORRUPT:
            logger.warning("Ignoring unreadable favorites file %s", self.path)
        self.cities = list(result.value_or([]))
        return list(self.cities)

    def save(self, cities: list[str] | None = None) -> None:
        """Overwrite the file with the full list; memory follows on success."""
        data = list(self.cities if cities is None else cities)
        write_json(self.path, data)
        self.cities = data

    def add(self, city: str) -> FavoriteOutcome:
        if city in self.cities:
            return FavoriteOutcome.ALREADY_PRESENT
        self.save(self.cities + [city])
        logger.info("Added favorite %r", city)
        return FavoriteOutcome.ADDED

    def remove(self, city: str) -> FavoriteOutcome:
        if city not in self.cities:
            return FavoriteOutcome.NOT_FOUND
        remaining = list(self.cities)
        remaining.remove(city)
        self.save(remaining)
        logger.info("Removed favorite %r", city)
        return FavoriteOutcome.REMOVED
