"""wayfinder - locate project-scoped data directories from a terminal or a GUI launch.

By default, wayfinder's internal logging is disabled when used as a library.
Library users can enable logging by calling wayfinder.enable_logging().
"""

from wayfinder.common import disable_library_logging, enable_library_logging
from wayfinder.discovery import (
    DirectoryResolver,
    DiscoveryRequest,
    DiscoveryResult,
    DiscoverySource,
    directory_exists,
    find_directory,
    resolve_directory,
)

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "DirectoryResolver",
    "DiscoveryRequest",
    "DiscoveryResult",
    "DiscoverySource",
    "directory_exists",
    "enable_logging",
    "find_directory",
    "resolve_directory",
]
