# Copyright 2026, Spellfix contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance between a and b (Wagner & Fischer, 1974)

    Insertions, deletions and substitutions all cost one. Only two rows of the
    cost matrix are kept in memory.
    """
    if not a:
        return len(b)
    if not b:
        return len(a)

    curr_row = list(range(len(a) + 1))
    prev_row = [0] * (len(a) + 1)
    for j, b_char in enumerate(b, start=1):
        prev_row, curr_row = curr_row, prev_row
        curr_row[0] = j
        for i, a_char in enumerate(a, start=1):
            # insertion / deletion
            cost_adj = 1 + min(prev_row[i], curr_row[i - 1])
            # match / substitution
            cost_diag = prev_row[i - 1] + (0 if a_char == b_char else 1)
            curr_row[i] = min(cost_adj, cost_diag)

    return curr_row[len(a)]
