"""
Constants and configuration settings for episode renaming.

Values that depend on the user's environment (API credentials, cache location,
default directory and series) are read from environment variables, after
loading an optional `.env` file from the working directory. Everything else is
a fixed default used across the matcher, the catalog client and the CLI.
"""

import os
import re

from dotenv import load_dotenv

load_dotenv()

# Accepted video file extensions
VIDEO_EXTENSIONS = {".mkv", ".mp4", ".avi", ".mov", ".m4v"}

# Matching
SIMILARITY_MAX_DISTANCE = 3
NORMALIZE_REGEX = re.compile(r"[^a-zA-Z0-9]")
FILENAME_STRIP_REGEX = re.compile(r"[^a-zA-Z0-9 \-]")
NONE_OF_THE_ABOVE = "None of the above"

# TheTVDB API configuration
TVDB_API_KEY = os.getenv("TVDB_API_KEY")
TVDB_PIN = os.getenv("TVDB_PIN")
TVDB_BASE_URL = os.getenv("TVDB_BASE_URL", "https://api4.thetvdb.com/v4")
TVDB_TIMEOUT = 30
TVDB_PAGE_DELAY = 1.0
TVDB_SEARCH_LIMIT = 10

# Local defaults
CACHE_DIR = os.getenv("TVRENAME_CACHE_DIR", "./cache")
DEFAULT_DIRECTORY = os.getenv("TVRENAME_DIRECTORY")
DEFAULT_SERIES_NAME = os.getenv("TVRENAME_SERIES_NAME")

# Rename status codes
STATUS_RENAMED = "RENAMED"
STATUS_UNCHANGED = "UNCHANGED"
STATUS_SKIP = "SKIP"
STATUS_FAIL = "FAIL"
STATUS_DRY_RUN = "DRY-RUN"

# Process exit codes
EXIT_OK = 0
EXIT_CATALOG_ERROR = 1
EXIT_INPUT_ERROR = 2
EXIT_INTERRUPTED = 130
