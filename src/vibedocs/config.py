"""Local configuration for vibedocs."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_DOCS_DIR = "docs"
DEFAULT_TOC_FILENAME = "TOC.md"
DEFAULT_SITE_URL = "https://vibecode.dev"
DEFAULT_SITE_NAME = "VibeCode"
DEFAULT_AUTHOR = "Tushar Aggarwal"
DEFAULT_WORDS_PER_MINUTE = 200
DEFAULT_CORPUS_TTL_SECONDS = 60
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "text"

# Root of the markdown corpus; numbered topic directories live directly under it.
VIBEDOCS_DOCS_PATH = Path(os.getenv("VIBEDOCS_DOCS_PATH", DEFAULT_DOCS_DIR)).expanduser().resolve()
VIBEDOCS_TOC_FILENAME = os.getenv("VIBEDOCS_TOC_FILENAME", DEFAULT_TOC_FILENAME)
VIBEDOCS_SITE_URL = os.getenv("VIBEDOCS_SITE_URL", DEFAULT_SITE_URL).rstrip("/")
VIBEDOCS_SITE_NAME = os.getenv("VIBEDOCS_SITE_NAME", DEFAULT_SITE_NAME)
VIBEDOCS_DEFAULT_AUTHOR = os.getenv("VIBEDOCS_DEFAULT_AUTHOR", DEFAULT_AUTHOR)
VIBEDOCS_WORDS_PER_MINUTE = int(os.getenv("VIBEDOCS_WORDS_PER_MINUTE", str(DEFAULT_WORDS_PER_MINUTE)))
VIBEDOCS_CORPUS_TTL_SECONDS = int(os.getenv("VIBEDOCS_CORPUS_TTL_SECONDS", str(DEFAULT_CORPUS_TTL_SECONDS)))
VIBEDOCS_LOG_LEVEL = os.getenv("VIBEDOCS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
VIBEDOCS_LOG_FORMAT = os.getenv("VIBEDOCS_LOG_FORMAT", DEFAULT_LOG_FORMAT).lower()
VIBEDOCS_EXTRA_CODE_LANGUAGES = frozenset(
    item.strip().lower()
    for item in os.getenv("VIBEDOCS_EXTRA_CODE_LANGUAGES", "").split(",")
    if item.strip()
)
