"""Defaults shared by the word-list loader and the CLI."""

from __future__ import annotations

import os

# Results printed per prefix unless --limit says otherwise (0 = no cap).
DEFAULT_LIMIT = 10

# Shortest entry kept when loading a word list.
MIN_LENGTH = 1

# Tried in order when no explicit word list is given.
DEFAULT_SEARCH_PATHS: list[str] = [
    "words.txt",
    "completions.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
    "/usr/share/dict/words",
]

PROMPT = "prefix> "
