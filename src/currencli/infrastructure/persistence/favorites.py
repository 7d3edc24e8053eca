"""JSON file store for favorite currency pairs.

Wire format: a JSON array of ``{"fromCurrency": ..., "toCurrency": ...}``
objects, pretty-printed with 2-space indentation. The whole list is rewritten
on every save; entries read from the file are written back exactly as stored.
"""
from __future__ import annotations

import json
from pathlib import Path

from currencli.domain.currencies import FavoritePair
from currencli.domain.errors import PersistenceError, ValidationError
from currencli.infrastructure.logging.config import get_logger

__all__ = ["JsonFavoritesStore"]

log = get_logger("currencli.favorites")


class JsonFavoritesStore:
    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> list[FavoritePair]:
        """Return stored pairs in insertion order; empty list if the file is absent."""
        if not self.path.exists():
            return []
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise PersistenceError(f"Error loading favorites: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise PersistenceError(f"Error loading favorites: malformed JSON in {self.path} ({exc})") from exc
        if not isinstance(raw, list):
            raise PersistenceError(f"Error loading favorites: expected a JSON array in {self.path}")
        try:
            return [FavoritePair.from_dict(item) for item in raw]
        except ValidationError as exc:
            raise PersistenceError(f"Error loading favorites: {exc}") from exc

    def save(self, pairs: list[FavoritePair]) -> None:
        payload = json.dumps([p.to_dict() for p in pairs], indent=2)
        try:
            self.path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Error saving favorites: {exc}") from exc
        log.debug("favorites_written", path=str(self.path), count=len(pairs))
