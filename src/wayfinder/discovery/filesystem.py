"""Local filesystem implementation of the FileSystem protocol."""

from __future__ import annotations

from pathlib import Path

from wayfinder.common import create_logger

logger = create_logger("discovery")


class LocalFileSystem:
    def exists(self, path: Path) -> bool:
        # Permission denied and malformed paths both count as absent
        try:
            return path.exists()
        except (OSError, ValueError) as error:
            logger.debug("Existence check failed, treating path as absent", path=str(path), error=str(error))
            return False

    def cwd(self) -> Path:
        return Path.cwd()

    def home(self) -> Path | None:
        # No HOME and no passwd entry, e.g. arbitrary container UIDs
        try:
            return Path.home()
        except RuntimeError as error:
            logger.debug("Home directory is unavailable", error=str(error))
            return None
