# Copyright 2026, Spellfix contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from spellfix.edits import ALPHABET
from spellfix.index import build_index, NOT_IN_INDEX, WordIndex, xor_hash

import pytest


def test_insert_and_lookup() -> None:
    index = WordIndex(8)
    index.insert("apple", 0)
    index.insert("banana", 1)
    assert index.lookup("apple") == 0
    assert index.lookup("banana") == 1
    assert index.lookup("cherry") == NOT_IN_INDEX
    assert len(index) == 2


def test_lookup_none_key() -> None:
    index = build_index(["apple"])
    assert index.lookup(None) == NOT_IN_INDEX
    assert index.key_of(None) is None


def test_zero_size_is_refused() -> None:
    with pytest.raises(AssertionError):
        WordIndex(0)


def test_negative_rank_is_refused() -> None:
    with pytest.raises(AssertionError):
        WordIndex(1).insert("apple", -1)


def test_build_index_ranks_are_positions() -> None:
    words = ["the", "quick", "brown", "fox"]
    index = build_index(words)
    assert index.size == len(words)
    assert [index.lookup(word) for word in words] == [0, 1, 2, 3]


def test_build_empty_index() -> None:
    index = build_index([])
    assert index.size == 1
    assert index.lookup("anything") == NOT_IN_INDEX


def test_key_of_returns_stored_key() -> None:
    stored = "".join(["hel", "lo"])
    index = build_index([stored])
    query = "".join(["he", "llo"])
    assert index.key_of(query) is stored
    assert index.key_of("help") is None


def test_lookup_promotes_entry_to_bucket_head() -> None:
    compared: list[str] = []
    # a single bucket puts every key in the same chain
    index = WordIndex(1, on_compare=compared.append)
    for rank, word in enumerate(["a", "b", "c"]):
        index.insert(word, rank)
    assert index.chain(0) == ["c", "b", "a"]

    assert index.lookup("a") == 0
    assert compared == ["c", "b", "a"]
    assert index.chain(0) == ["a", "c", "b"]

    compared.clear()
    assert index.lookup("b") == 1
    assert compared[0] == "a"
    assert index.chain(0) == ["b", "a", "c"]


def test_missing_lookup_does_not_reorder() -> None:
    index = WordIndex(1)
    for rank, word in enumerate(["a", "b", "c"]):
        index.insert(word, rank)
    assert index.lookup("d") == NOT_IN_INDEX
    assert index.chain(0) == ["c", "b", "a"]


def test_key_of_promotes() -> None:
    index = WordIndex(1)
    for rank, word in enumerate(["a", "b"]):
        index.insert(word, rank)
    assert index.key_of("a") == "a"
    assert index.chain(0) == ["a", "b"]


def test_duplicate_insert_shadows_earlier_entry() -> None:
    index = WordIndex(4)
    index.insert("word", 3)
    index.insert("word", 7)
    assert index.lookup("word") == 7
    assert len(index) == 2


def test_contains_does_not_promote() -> None:
    index = WordIndex(1)
    for rank, word in enumerate(["a", "b"]):
        index.insert(word, rank)
    assert "a" in index
    assert "z" not in index
    assert None not in index
    assert index.chain(0) == ["b", "a"]


def test_clear() -> None:
    index = build_index(["a", "b"])
    index.clear()
    assert len(index) == 0


@pytest.mark.parametrize("size", [1, 7, 64, 1000])
def test_xor_hash_is_deterministic_and_in_range(size: int) -> None:
    for word in ["", "a", "hello", "world", "z" * 100]:
        bucket = xor_hash(word, size)
        assert 0 <= bucket < size
        assert bucket == xor_hash("".join(list(word)), size)


def test_xor_hash_of_empty_string_is_seed() -> None:
    assert xor_hash("", 100000) == 73802


def test_xor_hash_spreads_lowercase_words() -> None:
    words = [a + b for a in ALPHABET for b in ALPHABET]
    buckets = {xor_hash(word, 97) for word in words}
    assert len(buckets) > 48
