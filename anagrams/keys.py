"""Canonical keys: every anagram of a word reduces to the same key."""

from __future__ import annotations

import string

from anagrams.constants import HASH_MULTIPLIER

_LETTERS = frozenset(string.ascii_letters)
_HASH_MASK = (1 << 64) - 1


def remove_non_letters(s: str) -> str:
    """Keep only the ASCII letters of ``s``, lowercased, in their original order."""
    return "".join(ch.lower() for ch in s if ch in _LETTERS)


def canonicalize(s: str) -> str:
    """Letters-only, lowercase, sorted form of ``s``.

    ``canonicalize("Listen!") == canonicalize("silent") == "eilnst"``.
    Strings without letters canonicalize to ``""``.
    """
    return "".join(sorted(remove_non_letters(s)))


def bucket_index(key: str, bucket_count: int) -> int:
    """Map a canonical key to a bucket in ``range(bucket_count)``.

    Polynomial hash rather than ``hash()``, so placement does not depend
    on PYTHONHASHSEED.
    """
    h = 0
    for ch in key:
        h = (h * HASH_MULTIPLIER + ord(ch)) & _HASH_MASK
    return h % bucket_count
