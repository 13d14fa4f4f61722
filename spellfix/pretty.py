# Copyright 2026, Spellfix contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Pretty-print spell check results as tables"""
from __future__ import annotations

from .corrector import Correction
from typing import Any, Collection, Iterator, Mapping, TextIO

import sys

TABLE_LAYOUT = ["word", "correction", "found"]


def to_json(results: Collection[Correction]) -> list[dict[str, Any]]:
    return [{"word": r.word, "correction": r.correction, "found": r.found} for r in results]


def format_item(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)


def yield_table(
    rows: Collection[Mapping[str, Any]],
    table_layout: Collection[str] = TABLE_LAYOUT,
    header: bool = True,
) -> Iterator[str]:
    """
    format a list of dicts in a table yielding string rows

    :param list rows: List of dicts to be printed.
    :param list table_layout: Fields to be printed, in column order.
    :param bool header: True to print the field names
    """
    formatted_values = [{key: format_item(row.get(key)) for key in table_layout} for row in rows]
    widths = {
        key: max([len(key)] + [len(formatted_row[key]) for formatted_row in formatted_values]) for key in table_layout
    }

    if header:
        yield "  ".join(f.upper().ljust(widths[f]) for f in table_layout)
        yield "  ".join("=" * widths[f] for f in table_layout)
    for formatted_row in formatted_values:
        yield "  ".join(formatted_row[f].ljust(widths[f]) for f in table_layout).strip()


def print_table(results: Collection[Correction], header: bool = True, file: TextIO | None = None) -> None:
    """print spell check results in a table"""
    for row in yield_table(to_json(results), header=header):
        print(row, file=file or sys.stdout)
