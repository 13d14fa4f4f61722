# Copyright 2026, Spellfix contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.

from .argx import arg, UserError
from .edits import is_alphabetic
from functools import wraps


def lowercase_word(param_name, help_text):
    """Positional word argument limited to the lowercase alphabet"""

    def wrapper(fun):
        arg(param_name, help=help_text)(fun)

        @wraps(fun)
        def wrapped(self):
            word = getattr(self.args, param_name)
            if not is_alphabetic(word):
                raise UserError(f"Invalid word {word!r}: only lowercase letters a-z are supported")
            return fun(self)

        return wrapped

    return wrapper


arg.lowercase_word = lowercase_word
arg.document = arg("document", help="Document to check, one word per line, '-' for stdin or a http(s) URL")
arg.dictionary = arg(
    "-d",
    "--dictionary",
    help="Dictionary word list, one word per line, '-' for stdin or a http(s) URL",
)
arg.max_distance = arg(
    "--max-distance",
    type=int,
    help="Maximum number of edits between a word and its correction (0-3)",
)
arg.request_timeout = arg("--request-timeout", type=int, help="Timeout for fetching remote word lists in seconds")
arg.json = arg("--json", help="Raw json output", action="store_true", default=False)
arg.table = arg("--table", help="Tabular output", action="store_true", default=False)
arg.no_header = arg("--no-header", help="Omit table header row", action="store_true", default=False)
