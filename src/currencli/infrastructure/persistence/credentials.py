from __future__ import annotations

from pathlib import Path

from currencli.domain.errors import PersistenceError
from currencli.infrastructure.logging.config import get_logger

__all__ = ["FileCredentialStore"]

log = get_logger("currencli.credentials")


class FileCredentialStore:
    """Plain-text, single-line API key file.

    The file is read on every run and only written when no key was found.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> str | None:
        """Return the trimmed key, or None if the file is missing or blank."""
        try:
            content = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise PersistenceError(f"Error loading API key: {exc}") from exc
        return content or None

    def save(self, credential: str) -> None:
        try:
            self.path.write_text(credential, encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Error saving API key: {exc}") from exc
        log.debug("credential_written", path=str(self.path))
