"""
Persistent changelog file access.

The changelog is read in full once (for PR deduplication) and rewritten
once with the new release block placed in front of the existing content.
"""

from __future__ import annotations

import logging
from pathlib import Path


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class ChangelogError(Exception):
    """Raised when the changelog file cannot be read or written."""

    pass


class ChangelogStore:
    """Read and prepend to a single changelog file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def read(self) -> str:
        """Return the full changelog text.

        Raises
        ------
        ChangelogError
            If the file is missing or unreadable.
        """
        try:
            return self.path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to read changelog %s: %s", self.path, exc)
            raise ChangelogError(f"Unable to read changelog {self.path}: {exc}") from exc

    def prepend(self, text: str) -> None:
        """Write ``text`` followed by the current content back to the file."""
        existing = self.read()
        try:
            self.path.write_text(text + existing, encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to write changelog %s: %s", self.path, exc)
            raise ChangelogError(f"Unable to write changelog {self.path}: {exc}") from exc
        logger.debug("Prepended %d characters to %s", len(text), self.path)
