# Copyright 2026, Spellfix contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from . import argx, envdefault
from .cliarg import arg
from .corrector import Corrector, MAX_DISTANCE
from .distance import edit_distance
from .edits import neighbors
from .wordlist import read_words, STDIN, validate_words
from typing import Any


class SpellCLI(argx.CommandLineTool):
    def __init__(self) -> None:
        super().__init__("spellfix")

    def _setting(self, attr: str, env_value: str | None, config_key: str) -> Any:
        value = getattr(self.args, attr, None)
        if value is None:
            value = env_value
        if value is None:
            value = self.config.get(config_key)
        return value

    def _get_max_distance(self) -> int:
        value = self._setting("max_distance", envdefault.SPELLFIX_MAX_DISTANCE, "max_distance")
        if value is None:
            return MAX_DISTANCE
        try:
            max_distance = int(value)
        except (TypeError, ValueError) as ex:
            raise argx.UserError(f"Invalid max distance {value!r}: expected an integer") from ex
        if not 0 <= max_distance <= MAX_DISTANCE:
            raise argx.UserError(f"Invalid max distance {max_distance}: must be between 0 and {MAX_DISTANCE}")
        return max_distance

    def _get_request_timeout(self) -> int | None:
        value = self._setting("request_timeout", None, "request_timeout")
        if value is None:
            return None
        try:
            timeout = int(value)
        except (TypeError, ValueError) as ex:
            raise argx.UserError(f"Invalid request timeout {value!r}: expected an integer") from ex
        if timeout <= 0:
            raise argx.UserError(f"Invalid request timeout {timeout}: must be positive")
        return timeout

    def _load(self, source: str) -> list[str]:
        timeout = self._get_request_timeout()
        words = read_words(source, timeout=timeout)
        validate_words(words, source)
        return words

    def _load_corrector(self, max_distance: int = MAX_DISTANCE) -> Corrector:
        source = self._setting("dictionary", envdefault.SPELLFIX_DICTIONARY, "dictionary")
        if not source:
            raise argx.UserError(
                "no dictionary: use --dictionary, set SPELLFIX_DICTIONARY or add 'dictionary' to {!r}".format(
                    self.config.file_path
                )
            )
        if source == STDIN and self.args.document == STDIN:
            raise argx.UserError("dictionary and document cannot both be read from standard input")
        dictionary = self._load(source)
        self.log.debug("Loaded %d dictionary words from %s", len(dictionary), source)
        return Corrector(dictionary, max_distance=max_distance)

    @arg.lowercase_word("word1", "First word")
    @arg.lowercase_word("word2", "Second word")
    def distance(self) -> None:
        """Print the edit distance between two words"""
        self.print_response([edit_distance(self.args.word1, self.args.word2)])

    @arg.lowercase_word("word", "Word to edit")
    def edits(self) -> None:
        """Print all strings one edit away from a word"""
        self.print_response(neighbors(self.args.word))

    @arg.document
    @arg.dictionary
    @arg.request_timeout
    @arg.json
    @arg.table
    @arg.no_header
    def check(self) -> None:
        """Print document words, marking those not in the dictionary with '?'"""
        corrector = self._load_corrector()
        document = self._load(self.args.document)
        self.print_response(
            list(corrector.check_all(document)),
            json=self.args.json,
            table=self.args.table,
            header=not self.args.no_header,
        )

    @arg.document
    @arg.dictionary
    @arg.max_distance
    @arg.request_timeout
    @arg.json
    @arg.table
    @arg.no_header
    def correct(self) -> None:
        """Print the correction of every document word, or the word with '?' if there is none"""
        corrector = self._load_corrector(self._get_max_distance())
        document = self._load(self.args.document)
        results = list(corrector.correct_all(document))
        changed = sum(1 for result in results if result.found and result.correction != result.word)
        self.log.debug("Corrected %d of %d words", changed, len(results))
        self.print_response(
            results,
            json=self.args.json,
            table=self.args.table,
            header=not self.args.no_header,
        )


if __name__ == "__main__":
    SpellCLI().main()
