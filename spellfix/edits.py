# Copyright 2026, Spellfix contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from typing import Final

ALPHABET: Final = "abcdefghijklmnopqrstuvwxyz"


def edit_count(length: int) -> int:
    """Number of strings one edit away from a word of the given length.

    insertions (length + 1) * 26, substitutions length * 25, deletions length
    """
    return (2 * length + 1) * len(ALPHABET)


def is_alphabetic(word: str) -> bool:
    return all(c in ALPHABET for c in word)


def neighbors(word: str) -> list[str]:
    """All strings exactly one edit away from `word`.

    `word` must only consist of ALPHABET characters, the result then holds
    exactly edit_count(len(word)) strings. The result is not deduplicated:
    different edits can produce the same string, e.g. inserting "a" before or
    after the "a" of "ab", and both copies are kept so the count holds for
    every word.
    """
    edits: list[str] = []

    for i in range(len(word), -1, -1):
        left, right = word[:i], word[i:]
        edits.extend(left + c + right for c in ALPHABET)

    for i in range(len(word) - 1, -1, -1):
        left, current, right = word[:i], word[i], word[i + 1 :]
        edits.extend(left + c + right for c in ALPHABET if c != current)

    for i in range(len(word) - 1, -1, -1):
        edits.append(word[:i] + word[i + 1 :])

    return edits
