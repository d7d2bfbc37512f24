"""Directory discovery with override, upward search and home fallback.

Resolution order, first match wins:
1. ``{PREFIX}_SUBDIR`` environment variable (when the request names a prefix)
2. Upward search from ``PROJECT_DIR``, the requested start directory, or the working directory
3. Home directory fallback (when enabled)

Absence is never an error: the result carries ``exists=False`` and a best-effort path.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from wayfinder.common import create_logger
from wayfinder.constants import PROJECT_DIR_ENV_VAR, subdir_env_var

from .filesystem import LocalFileSystem
from .models import DiscoveryRequest, DiscoveryResult, DiscoverySource
from .protocol import FileSystem

logger = create_logger("discovery")


class DirectoryResolver:
    """Resolves discovery requests against an environment and a filesystem.

    Args:
        environ: Environment variable lookup, defaults to the live ``os.environ``
        filesystem: Existence checks and cwd/home lookup, defaults to the local filesystem
    """

    def __init__(self, environ: Mapping[str, str] | None = None, filesystem: FileSystem | None = None) -> None:
        self._environ = environ if environ is not None else os.environ
        self._fs = filesystem if filesystem is not None else LocalFileSystem()

    def resolve(self, request: DiscoveryRequest) -> DiscoveryResult:
        override = self._override_path(request)
        if override is not None:
            logger.debug("Using subdirectory override", path=str(override))
            return DiscoveryResult(
                path=override,
                source=DiscoverySource.ENV_OVERRIDE,
                exists=self._fs.exists(override),
            )

        start_dir, from_project_env = self._start_directory(request)
        project_source = DiscoverySource.ENV_PROJECT if from_project_env else DiscoverySource.PROJECT
        logger.debug("Searching upward", start_dir=str(start_dir), subdirectory=request.subdirectory)

        found = self._search_upward(start_dir, request.subdirectory)
        if found is not None:
            logger.debug("Found directory", path=str(found), source=project_source.value)
            return DiscoveryResult(path=found, source=project_source, exists=True)

        home_dir = self._fs.home() if request.use_home_fallback else None
        if home_dir is None:
            if request.use_home_fallback:
                logger.debug("No home directory to fall back to", start_dir=str(start_dir))
            return DiscoveryResult(
                path=_normalize(start_dir / request.subdirectory),
                source=project_source,
                exists=False,
            )

        home_path = _normalize(home_dir / request.effective_home_subdirectory)
        logger.debug("Falling back to home directory", path=str(home_path))
        return DiscoveryResult(
            path=home_path,
            source=DiscoverySource.HOME,
            exists=self._fs.exists(home_path),
        )

    def path(self, request: DiscoveryRequest) -> Path:
        return self.resolve(request).path

    def exists(self, request: DiscoveryRequest) -> bool:
        return self.resolve(request).exists

    def _override_path(self, request: DiscoveryRequest) -> Path | None:
        if request.override_env_name is None:
            return None
        # Empty string counts as unset
        value = self._environ.get(subdir_env_var(request.override_env_name))
        if not value:
            return None
        return self._absolute(value)

    def _start_directory(self, request: DiscoveryRequest) -> tuple[Path, bool]:
        project_dir = self._environ.get(PROJECT_DIR_ENV_VAR)
        if project_dir:
            return self._absolute(project_dir), True
        if request.start_directory is not None:
            return self._absolute(request.start_directory), False
        return _normalize(self._fs.cwd()), False

    def _search_upward(self, start_dir: Path, subdirectory: str) -> Path | None:
        # Path.parents ends at the root, so the root is a candidate too
        for directory in [start_dir, *start_dir.parents]:
            candidate = _normalize(directory / subdirectory)
            if self._fs.exists(candidate):
                return candidate
        return None

    def _absolute(self, value: str | Path) -> Path:
        return _normalize(self._fs.cwd() / value)


def _normalize(path: Path) -> Path:
    # Lexical only: collapses "." and ".." but keeps symlinks as given
    return Path(os.path.normpath(path))


def resolve_directory(request: DiscoveryRequest) -> DiscoveryResult:
    """Resolve ``request`` against the process environment and the local filesystem."""
    return DirectoryResolver().resolve(request)


def find_directory(request: DiscoveryRequest) -> Path:
    return resolve_directory(request).path


def directory_exists(request: DiscoveryRequest) -> bool:
    return resolve_directory(request).exists
