"""FileSystem protocol used by the resolver."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    """Read-only view of the filesystem needed for discovery."""

    def exists(self, path: Path) -> bool:
        """Return True when something exists at ``path``.

        Implementations report False instead of raising when the check itself fails.
        """
        ...

    def cwd(self) -> Path: ...

    def home(self) -> Path | None:
        """Return the home directory, or None when it cannot be determined."""
        ...
