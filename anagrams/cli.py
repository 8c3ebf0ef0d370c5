"""CLI / terminal mode for the anagram finder."""

from __future__ import annotations

import time

from anagrams.dictionary import Dictionary

QUIT_COMMANDS = {"quit", "exit", "q"}


def print_anagrams(dictionary: Dictionary, letters: str) -> int:
    """Print every anagram of ``letters``; returns how many were found."""
    t0 = time.time()
    found = dictionary.anagrams_of(letters)
    elapsed = time.time() - t0

    if not found:
        print(f"  No anagrams of '{letters}' ({elapsed * 1000:.2f} ms)")
        return 0

    print(f"  {len(found)} anagram(s) of '{letters}' ({elapsed * 1000:.2f} ms):")
    for word in found:
        print(f"    {word}")
    return len(found)


def run_queries(dictionary: Dictionary, queries: list[str]) -> int:
    """One-shot mode. Returns the total number of matches printed."""
    return sum(print_anagrams(dictionary, q) for q in queries)


def run_cli(dictionary: Dictionary) -> None:
    """Interactive prompt: read letters, print their anagrams, repeat."""
    print("\n" + "=" * 60)
    print("  ANAGRAM FINDER")
    print("=" * 60)
    print(f"  {len(dictionary):,} words loaded.")
    print("  Enter letters to search; blank line or 'quit' to exit.")
    print()

    while True:
        try:
            inp = input("letters> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not inp or inp.lower() in QUIT_COMMANDS:
            break
        print_anagrams(dictionary, inp)
