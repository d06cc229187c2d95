"""
A module providing constants, utility functions, and logging mechanisms
for episode renaming.

This module includes the configuration constants read from the environment,
the structured logger, file discovery helpers and interactive prompts. The
TheTVDB client lives in `tvrename.utils.tvdb` and is imported explicitly by
its users so that importing the utilities never requires network settings.
"""

from .constants import (
    CACHE_DIR,
    SIMILARITY_MAX_DISTANCE,
    STATUS_DRY_RUN,
    STATUS_FAIL,
    STATUS_RENAMED,
    STATUS_SKIP,
    STATUS_UNCHANGED,
    TVDB_API_KEY,
    TVDB_BASE_URL,
    TVDB_PIN,
    VIDEO_EXTENSIONS,
)
from .logger import LogLevel

__all__ = [
    "VIDEO_EXTENSIONS",
    "SIMILARITY_MAX_DISTANCE",
    "CACHE_DIR",
    "TVDB_API_KEY",
    "TVDB_PIN",
    "TVDB_BASE_URL",
    "STATUS_RENAMED",
    "STATUS_UNCHANGED",
    "STATUS_SKIP",
    "STATUS_FAIL",
    "STATUS_DRY_RUN",
    "LogLevel",
]
