"""Public directory discovery API for wayfinder."""

from __future__ import annotations

from .filesystem import LocalFileSystem
from .models import DiscoveryRequest, DiscoveryResult, DiscoverySource
from .protocol import FileSystem
from .resolver import DirectoryResolver, directory_exists, find_directory, resolve_directory

__all__ = [
    "DirectoryResolver",
    "DiscoveryRequest",
    "DiscoveryResult",
    "DiscoverySource",
    "FileSystem",
    "LocalFileSystem",
    "directory_exists",
    "find_directory",
    "resolve_directory",
]
