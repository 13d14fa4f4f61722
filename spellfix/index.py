# Copyright 2026, Spellfix contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Fixed size chained hash index from dictionary words to their rank"""
from __future__ import annotations

from typing import Callable, Final, Iterable, NamedTuple

import logging

NOT_IN_INDEX: Final = -1
XOR_SEED: Final = 73802
_UINT_MASK: Final = 0xFFFFFFFF

log = logging.getLogger(__name__)


def xor_hash(key: str, size: int) -> int:
    """The xor string hash of Zobel & Ramakrishnan (1997), reduced to a bucket number"""
    h = XOR_SEED
    for c in key:
        # unsigned 32 bit arithmetic
        h ^= ((h << 5) + ord(c) + (h >> 2)) & _UINT_MASK
    return h % size


class Entry(NamedTuple):
    key: str
    rank: int


class WordIndex:
    """Maps words to their non-negative rank.

    Every bucket is a chain of entries. A successful lookup moves the matched
    entry to the head of its chain so that frequently queried words are found
    with fewer comparisons. Entries are never dropped.

    Keys are the caller's strings, the index only holds references to them.
    """

    def __init__(self, size: int, on_compare: Callable[[str], None] | None = None) -> None:
        assert size > 0, f"Index size must be positive, got {size!r}"
        self.size = size
        self.on_compare = on_compare
        self._buckets: list[list[Entry]] = [[] for _ in range(size)]
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return any(entry.key == key for entry in self._buckets[xor_hash(key, self.size)])

    def bucket_of(self, key: str) -> int:
        return xor_hash(key, self.size)

    def chain(self, bucket: int) -> list[str]:
        """Keys of a bucket in chain order, head first"""
        return [entry.key for entry in self._buckets[bucket]]

    def insert(self, key: str, rank: int) -> None:
        # does not check whether the key is already present
        assert key is not None and rank >= 0, f"Invalid index entry {key!r}: {rank!r}"
        self._buckets[xor_hash(key, self.size)].insert(0, Entry(key, rank))
        self._count += 1

    def lookup(self, key: str | None) -> int:
        """Rank of key, promoting it to the head of its chain, or NOT_IN_INDEX"""
        if key is None:
            return NOT_IN_INDEX

        chain = self._buckets[xor_hash(key, self.size)]
        for position, entry in enumerate(chain):
            if self.on_compare is not None:
                self.on_compare(entry.key)
            if entry.key == key:
                if position:
                    del chain[position]
                    chain.insert(0, entry)
                return entry.rank

        return NOT_IN_INDEX

    def key_of(self, key: str | None) -> str | None:
        """The stored key equal to key, or None"""
        if self.lookup(key) == NOT_IN_INDEX:
            return None
        assert key is not None
        # lookup moved the match to the front
        return self._buckets[xor_hash(key, self.size)][0].key

    def clear(self) -> None:
        self._buckets = []
        self._count = 0


def build_index(words: Iterable[str]) -> WordIndex:
    """Index every word with its position in words as rank"""
    word_list = words if isinstance(words, list) else list(words)
    # at least one bucket, modulo zero is undefined
    index = WordIndex(len(word_list) or 1)
    for rank, word in enumerate(word_list):
        index.insert(word, rank)
    log.debug("Built index of %d words", len(word_list))
    return index
