"""Request and result models for directory discovery."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic.dataclasses import dataclass as pydantic_dataclass

from wayfinder.common import NonEmptyString, RelativePathString


class DiscoverySource(str, Enum):
    """Which resolution strategy produced a path."""

    ENV_OVERRIDE = "env-override"
    ENV_PROJECT = "env-project"
    PROJECT = "project"
    HOME = "home"


@pydantic_dataclass(kw_only=True, frozen=True)
class DiscoveryRequest:
    """What to look for and how far to fall back.

    Attributes:
        subdirectory: Relative path searched for at each level, e.g. ".prompts-mcp/prompts"
        override_env_name: Prefix of the ``{PREFIX}_SUBDIR`` override variable, None to skip it
        start_directory: Where the upward search begins, None for the working directory
        use_home_fallback: Fall back to the home directory when the search finds nothing
        home_subdirectory: Path used under the home directory, None to reuse ``subdirectory``
    """

    subdirectory: RelativePathString
    override_env_name: NonEmptyString | None = None
    start_directory: Path | None = None
    use_home_fallback: bool = True
    home_subdirectory: RelativePathString | None = None

    @property
    def effective_home_subdirectory(self) -> str:
        return self.home_subdirectory or self.subdirectory


@dataclass(frozen=True, slots=True)
class DiscoveryResult:
    """Resolved directory with its provenance.

    ``path`` is always populated, even when nothing exists there.
    """

    path: Path
    source: DiscoverySource
    exists: bool

    def to_dict(self) -> dict[str, object]:
        return {"path": str(self.path), "source": self.source.value, "exists": self.exists}
