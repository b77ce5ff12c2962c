"""Configuration for the server."""

from __future__ import annotations

import os

MAX_SEARCH_RESULTS: int = int(os.getenv("VIBEDOCS_MAX_SEARCH_RESULTS", "50"))
DEFAULT_SEARCH_LIMIT: int = 20
MAX_DISPLAY_SIZE: int = 300_000  # characters of markdown returned inline
APP_TITLE = "vibedocs"
APP_DESCRIPTION = "Read-only API over a markdown documentation corpus."
APP_VERSION = "0.1.0"
