"""Anagram finder -- hash table of words keyed by sorted letters."""

from anagrams.constants import DEFAULT_MAX_BUCKETS, INITIAL_BUCKETS, MAX_LOAD_FACTOR
from anagrams.dictionary import Dictionary
from anagrams.keys import bucket_index, canonicalize, remove_non_letters
from anagrams.table import AnagramTable, InvalidConfiguration

__all__ = [
    "DEFAULT_MAX_BUCKETS",
    "INITIAL_BUCKETS",
    "MAX_LOAD_FACTOR",
    "AnagramTable",
    "Dictionary",
    "InvalidConfiguration",
    "bucket_index",
    "canonicalize",
    "remove_non_letters",
]
