# Copyright 2026, Spellfix contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""
Configurable parameters via environment variables
"""

import os

USER_HOME = os.path.expanduser("~")

SPELLFIX_CONFIG_DIR = os.environ.get("SPELLFIX_CONFIG_DIR", os.path.join(USER_HOME, ".config", "spellfix"))

SPELLFIX_CONFIG = os.environ.get("SPELLFIX_CONFIG", os.path.join(SPELLFIX_CONFIG_DIR, "spellfix.json"))
SPELLFIX_DICTIONARY = os.environ.get("SPELLFIX_DICTIONARY")
SPELLFIX_MAX_DISTANCE = os.environ.get("SPELLFIX_MAX_DISTANCE")
