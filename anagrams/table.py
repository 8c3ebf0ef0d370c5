"""Anagram hash table: chains of words bucketed by their canonical key."""

from __future__ import annotations

import logging
from typing import Callable

from anagrams.constants import GROWTH_FACTOR, INITIAL_BUCKETS, MAX_LOAD_FACTOR
from anagrams.keys import bucket_index, canonicalize

log = logging.getLogger("anagrams")

Visitor = Callable[[str], object]


class InvalidConfiguration(ValueError):
    """Raised when a table is constructed with unusable parameters."""


class AnagramTable:
    """Separate-chaining hash table keyed by sorted letters.

    Every anagram of a word canonicalizes to the same key, so all of them
    land in one chain. The table doubles its bucket count whenever the
    load factor passes ``MAX_LOAD_FACTOR``, but never beyond
    ``max_buckets``; past that point chains simply get longer.

    Chains hold the words exactly as inserted.  A chain is ``None`` until
    the first word lands in it.
    """

    __slots__ = ("_max_buckets", "_bucket_count", "_item_count", "_buckets")

    def __init__(self, max_buckets: int):
        if isinstance(max_buckets, bool) or not isinstance(max_buckets, int):
            raise InvalidConfiguration(
                f"max_buckets must be an integer, got {max_buckets!r}"
            )
        if max_buckets < 1:
            raise InvalidConfiguration(f"max_buckets must be >= 1, got {max_buckets}")

        self._max_buckets = max_buckets
        self._bucket_count = min(max_buckets, INITIAL_BUCKETS)
        self._item_count = 0
        self._buckets: list[list[str] | None] = [None] * self._bucket_count

    # stats

    @property
    def max_buckets(self) -> int:
        return self._max_buckets

    @property
    def bucket_count(self) -> int:
        return self._bucket_count

    @property
    def item_count(self) -> int:
        """Number of insert calls, including words with no letters."""
        return self._item_count

    @property
    def load_factor(self) -> float:
        return self._item_count / self._bucket_count

    def __len__(self) -> int:
        return self._item_count

    def __repr__(self) -> str:
        return (
            f"AnagramTable(items={self._item_count}, "
            f"buckets={self._bucket_count}/{self._max_buckets})"
        )

    # public API

    def insert(self, word: str) -> None:
        """Add ``word``; it becomes findable by any of its anagrams.

        The word counts toward the load factor even when it has no letters
        and is therefore not stored.
        """
        self._item_count += 1
        self._try_grow()

        key = canonicalize(word)
        if not key:
            return
        i = bucket_index(key, self._bucket_count)
        chain = self._buckets[i]
        if chain is None:
            chain = self._buckets[i] = []
        chain.append(word)

    def lookup(self, letters: str, visit: Visitor | None) -> None:
        """Call ``visit(word)`` for every stored anagram of ``letters``, in chain order."""
        if visit is None:
            return

        key = canonicalize(letters)
        if not key:
            return
        chain = self._buckets[bucket_index(key, self._bucket_count)]
        if not chain:
            return

        # The chain can hold other keys that hash alike; compare full keys.
        for word in chain:
            if canonicalize(word) == key:
                visit(word)

    def anagrams_of(self, letters: str) -> list[str]:
        """Stored anagrams of ``letters`` as a list, in the order ``lookup`` visits them."""
        found: list[str] = []
        self.lookup(letters, found.append)
        return found

    def close(self) -> None:
        """Release every chain. Counts are kept; the table stays usable."""
        self._buckets = [None] * self._bucket_count

    def __enter__(self) -> AnagramTable:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # growth

    def _try_grow(self) -> None:
        if self._bucket_count >= self._max_buckets:
            return
        if self._item_count / self._bucket_count <= MAX_LOAD_FACTOR:
            return

        old_count = self._bucket_count
        new_count = min(GROWTH_FACTOR * old_count, self._max_buckets)
        new_buckets: list[list[str] | None] = [None] * new_count
        for chain in self._buckets:
            if not chain:
                continue
            for word in chain:
                i = bucket_index(canonicalize(word), new_count)
                target = new_buckets[i]
                if target is None:
                    target = new_buckets[i] = []
                target.append(word)

        self._buckets = new_buckets
        self._bucket_count = new_count
        log.debug(
            "Grew table %d -> %d buckets (%d items, load %.2f)",
            old_count, new_count, self._item_count, self.load_factor,
        )

