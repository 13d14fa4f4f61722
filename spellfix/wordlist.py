# Copyright 2026, Spellfix contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Read dictionaries and documents, one word per line"""
from __future__ import annotations

from .argx import UserError
from .edits import is_alphabetic
from .session import fetch_text
from typing import Iterable, Sequence

import logging
import sys

REMOTE_PREFIXES = ("http://", "https://")
STDIN = "-"

log = logging.getLogger(__name__)


def parse_words(lines: Iterable[str]) -> list[str]:
    words = []
    for line in lines:
        word = line.strip()
        if word:
            words.append(word)
    return words


def read_words(source: str, *, timeout: int | None = None) -> list[str]:
    """Words from a local file, a http(s) URL or standard input ("-")"""
    if source == STDIN:
        try:
            return parse_words(sys.stdin)
        except UnicodeDecodeError as ex:
            raise UserError("Word list {!r} is not valid UTF-8".format(source)) from ex

    if source.startswith(REMOTE_PREFIXES):
        log.debug("Fetching word list from %s", source)
        return parse_words(fetch_text(source, timeout=timeout).splitlines())

    try:
        with open(source, encoding="utf-8") as fp:
            return parse_words(fp)
    except OSError as ex:
        raise UserError("Failed to read word list {!r}: {}: {}".format(source, ex.__class__.__name__, ex)) from ex
    except UnicodeDecodeError as ex:
        raise UserError("Word list {!r} is not valid UTF-8".format(source)) from ex


def validate_words(words: Sequence[str], source: str) -> None:
    """Refuse words with characters outside of the lowercase alphabet"""
    for line_number, word in enumerate(words, start=1):
        if not is_alphabetic(word):
            raise UserError(
                f"Invalid word {word!r} in {source!r} (word {line_number}): only lowercase letters a-z are supported"
            )
