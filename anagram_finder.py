#!/usr/bin/env python3
"""
Anagram Finder

Loads a word list into an anagram hash table and prints every word
that uses exactly the letters you give it. Case, spaces, digits and
punctuation in the query are ignored.

    python anagram_finder.py --dict words.txt silent
    python anagram_finder.py            # interactive
"""

from __future__ import annotations

import argparse
import logging

from anagrams.cli import run_cli, run_queries
from anagrams.constants import DEFAULT_MAX_BUCKETS
from anagrams.dictionary import Dictionary
from anagrams.table import InvalidConfiguration


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("anagrams")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Anagram Finder -- lists every dictionary word made of the given letters",
    )
    parser.add_argument("letters", nargs="*",
                        help="Letters to look up; omit for interactive mode")
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to word list file (one word per line)")
    parser.add_argument("--max-buckets", type=int, default=DEFAULT_MAX_BUCKETS,
                        help=f"Upper bound on hash table buckets (default {DEFAULT_MAX_BUCKETS})")
    parser.add_argument("--progress", action="store_true",
                        help="Show a progress bar while loading the word list")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


# Entry point

def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        dictionary = Dictionary.from_word_list(
            args.dict, max_buckets=args.max_buckets, progress=args.progress,
        )
    except InvalidConfiguration as exc:
        parser.error(str(exc))

    with dictionary:
        log.debug("Table ready: %r", dictionary.table)
        if args.letters:
            run_queries(dictionary, args.letters)
        else:
            run_cli(dictionary)


if __name__ == "__main__":
    main()
