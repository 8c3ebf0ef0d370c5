"""Table tunables and word-list defaults."""

from __future__ import annotations

import os

# Hash table sizing

INITIAL_BUCKETS = 10
MAX_LOAD_FACTOR = 0.7
DEFAULT_MAX_BUCKETS = 50_000
GROWTH_FACTOR = 2

HASH_MULTIPLIER = 31

# Word lists, tried in order when no explicit path is given

WORD_LIST_PATHS: list[str] = [
    "words.txt",
    "dictionary.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
    "/usr/share/dict/words",
]
