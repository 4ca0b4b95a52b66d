"""Conversion of ``E<hex>`` codes into Private Use Area glyphs."""

from __future__ import annotations

import re

from chat_emojis.errors import EmojiFormatError, InvalidCodeFormat, OutOfRange
from chat_emojis.literals import PUA_BASE, PUA_MAX
from chat_emojis.types import Glyph, HexCode

__all__ = [
    "emoji_format",
    "is_valid_code",
]

_CODE_RE = re.compile(r"[Ee]([0-9A-Fa-f]+)")


def emoji_format(code: HexCode) -> Glyph:
    """
    Convert a code like ``"E001"`` into the matching private-use character.

    The digits after the ``E`` are an offset from U+E000.  The result must stay
    inside U+E000 - U+EFFF; anything larger raises ``OutOfRange`` rather than
    being clamped.  Malformed input raises ``InvalidCodeFormat``.
    """
    m = _CODE_RE.fullmatch(code)
    if m is None:
        raise InvalidCodeFormat(code, "expected 'E' followed by hexadecimal digits")

    value = PUA_BASE + int(m.group(1), 16)
    if value > PUA_MAX:
        raise OutOfRange(code, "out of private use area")
    return chr(value)


def is_valid_code(code: HexCode) -> bool:  # noqa: D401
    """Return ``True`` when *code* would format successfully."""
    try:
        emoji_format(code)
    except EmojiFormatError:
        return False
    return True
