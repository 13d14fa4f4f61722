# Copyright 2026, Spellfix contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from .corrector import check, correct, Correction, Corrector, MAX_DISTANCE, search_indexed, search_scan  # noqa: F401
from .distance import edit_distance  # noqa: F401
from .edits import ALPHABET, edit_count, neighbors  # noqa: F401
from .index import build_index, NOT_IN_INDEX, WordIndex, xor_hash  # noqa: F401
