"""Canonical token literals and constants used throughout the project."""

import re
from typing import Literal

# Failure kinds reported when a registered code cannot be turned into a glyph.
ErrorKind = Literal[
    "InvalidCodeFormat",
    "OutOfRange",
]

# ---------------------------------------------------------------------------
# Private Use Area window ----------------------------------------------------
# ---------------------------------------------------------------------------

PUA_BASE = 0xE000
PUA_MAX = 0xEFFF

# Shortcode grammar: ':' + [A-Za-z0-9_]+ + ':'
ALIAS_PATTERN = r":[a-zA-Z0-9_]+:"
ALIAS_RE = re.compile(ALIAS_PATTERN)

__all__ = [
    "ErrorKind",
    "PUA_BASE",
    "PUA_MAX",
    "ALIAS_PATTERN",
    "ALIAS_RE",
]
