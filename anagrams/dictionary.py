"""Dictionary: word-list front end over the anagram table."""

from __future__ import annotations

import logging
import os

from tqdm import tqdm

from anagrams.constants import DEFAULT_MAX_BUCKETS, WORD_LIST_PATHS
from anagrams.table import AnagramTable, Visitor

log = logging.getLogger("anagrams")


class Dictionary:
    """Anagram dictionary. Storage and lookup are delegated to an AnagramTable."""

    def __init__(self, max_buckets: int = DEFAULT_MAX_BUCKETS):
        self.table = AnagramTable(max_buckets)

    @classmethod
    def from_word_list(
        cls,
        dict_path: str | None = None,
        max_buckets: int = DEFAULT_MAX_BUCKETS,
        progress: bool = False,
    ) -> Dictionary:
        """Load the first word list found, trying ``dict_path`` before the defaults."""
        d = cls(max_buckets)

        search_paths: list[str] = []
        if dict_path:
            search_paths.append(dict_path)
        search_paths.extend(WORD_LIST_PATHS)

        for path in search_paths:
            if os.path.exists(path):
                count = d.load(path, progress=progress)
                log.info("Loaded %s words from %s", f"{count:,}", path)
                return d

        log.warning("No word list found -- the dictionary is empty.")
        log.warning("Pass --dict or save a word list as words.txt.")
        return d

    def load(self, path: str, progress: bool = False) -> int:
        """Insert every non-blank line of ``path``. Returns the number of words read."""
        count = 0
        with open(path, "r", encoding="utf-8") as f:
            for line in tqdm(f, desc="Loading", unit=" words", disable=not progress):
                word = line.strip()
                if not word:
                    continue
                self.table.insert(word)
                count += 1
        log.debug("Read %d words from %s (%r)", count, path, self.table)
        return count

    # pass-through

    def insert(self, word: str) -> None:
        self.table.insert(word)

    def lookup(self, letters: str, visit: Visitor | None) -> None:
        self.table.lookup(letters, visit)

    def anagrams_of(self, letters: str) -> list[str]:
        return self.table.anagrams_of(letters)

    def close(self) -> None:
        self.table.close()

    def __len__(self) -> int:
        return len(self.table)

    def __enter__(self) -> Dictionary:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
