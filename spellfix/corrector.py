# Copyright 2026, Spellfix contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .distance import edit_distance
from .edits import edit_count, neighbors
from .index import build_index, NOT_IN_INDEX, WordIndex
from typing import Final, Iterable, Iterator, NamedTuple, Sequence

import logging

MAX_DISTANCE: Final = 3
# Largest cost estimate worth computing, scanning the dictionary is always cheaper beyond it
COST_LIMIT: Final = 2**31 - 1

log = logging.getLogger(__name__)


class Correction(NamedTuple):
    word: str
    correction: str | None

    @property
    def found(self) -> bool:
        return self.correction is not None

    def __str__(self) -> str:
        return self.correction if self.correction is not None else f"{self.word}?"


def search_indexed(word: str, index: WordIndex, distance: int) -> str | None:
    """Dictionary word `distance` edits from word with the lowest rank, by enumerating edits"""
    if distance <= 0:
        return index.key_of(word)

    corrected = None
    rank = NOT_IN_INDEX
    for edit in neighbors(word):
        candidate = search_indexed(edit, index, distance - 1)
        if candidate is None:
            continue
        candidate_rank = index.lookup(candidate)
        if corrected is None or candidate_rank < rank:
            corrected, rank = candidate, candidate_rank

    return corrected


def search_scan(word: str, dictionary: Iterable[str], distance: int, ceiling: int = MAX_DISTANCE) -> str | None:
    """First dictionary word at most `distance` edits from word, or else the closest one

    Words more than `ceiling` edits away are never returned.
    """
    corrected = None
    min_distance = max(ceiling, distance) + 1
    for candidate in dictionary:
        # the distance is at least the difference in length
        if abs(len(candidate) - len(word)) >= min_distance:
            continue
        candidate_distance = edit_distance(candidate, word)
        if candidate_distance <= distance:
            return candidate
        if candidate_distance < min_distance:
            min_distance = candidate_distance
            corrected = candidate

    return corrected


def check(word: str, index: WordIndex) -> bool:
    return search_indexed(word, index, 0) is not None


def correct(
    word: str,
    dictionary: Sequence[str],
    max_distance: int = MAX_DISTANCE,
    index: WordIndex | None = None,
) -> str | None:
    """Best correction for word within max_distance edits, None if there is none.

    Enumerating edits costs roughly edit_count(len(word)) ** distance lookups
    while a scan is linear in the dictionary size, so the search escalates
    distance with the index until a scan becomes cheaper.
    """
    if index is None:
        index = build_index(dictionary)

    cost, multiplier = 1, edit_count(len(word))
    for distance in range(max_distance + 1):
        if len(dictionary) <= cost or cost > COST_LIMIT:
            log.debug("Scanning %d words for %r at distance %d", len(dictionary), word, distance)
            return search_scan(word, dictionary, distance, ceiling=max_distance)

        log.debug("Searching edits of %r at distance %d", word, distance)
        corrected = search_indexed(word, index, distance)
        if corrected is not None:
            return corrected
        cost = min(cost * multiplier, COST_LIMIT + 1)

    return None


class Corrector:
    """Spell checks and corrects words against a dictionary"""

    def __init__(self, dictionary: Sequence[str], max_distance: int = MAX_DISTANCE) -> None:
        assert 0 <= max_distance <= MAX_DISTANCE, f"max_distance must be within 0..{MAX_DISTANCE}"
        self.dictionary = dictionary
        self.max_distance = max_distance
        self.index = build_index(dictionary)

    def check(self, word: str) -> bool:
        return check(word, self.index)

    def correct(self, word: str) -> str | None:
        return correct(word, self.dictionary, self.max_distance, index=self.index)

    def check_all(self, document: Iterable[str]) -> Iterator[Correction]:
        for word in document:
            yield Correction(word, word if self.check(word) else None)

    def correct_all(self, document: Iterable[str]) -> Iterator[Correction]:
        for word in document:
            yield Correction(word, self.correct(word))
