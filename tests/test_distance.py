# Copyright 2026, Spellfix contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from spellfix.distance import edit_distance

import itertools
import pytest

WORDS = ["", "a", "ab", "abc", "kitten", "sitting", "flaw", "lawn", "hello", "world", "wrold"]


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("", "", 0),
        ("", "abc", 3),
        ("abc", "", 3),
        ("abc", "abc", 0),
        ("a", "b", 1),
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("wrold", "world", 2),
        ("hello", "world", 4),
        ("cats", "cat", 1),
        ("intention", "execution", 5),
    ],
)
def test_edit_distance(a: str, b: str, expected: int) -> None:
    assert edit_distance(a, b) == expected


def test_edit_distance_is_symmetric() -> None:
    for a, b in itertools.product(WORDS, repeat=2):
        assert edit_distance(a, b) == edit_distance(b, a)


def test_edit_distance_to_self_and_empty() -> None:
    for word in WORDS:
        assert edit_distance(word, word) == 0
        assert edit_distance("", word) == len(word)


def test_edit_distance_is_at_least_length_difference() -> None:
    for a, b in itertools.product(WORDS, repeat=2):
        assert edit_distance(a, b) >= abs(len(a) - len(b))
