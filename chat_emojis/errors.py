"""Exception types raised by the formatter and the emoji file loader."""

from __future__ import annotations

from typing import ClassVar

from chat_emojis.literals import ErrorKind

__all__ = [
    "EmojiFormatError",
    "InvalidCodeFormat",
    "OutOfRange",
    "EmojiFileError",
]


class EmojiFormatError(ValueError):
    """A registered hex code could not be converted into a glyph."""

    kind: ClassVar[ErrorKind]

    def __init__(self, code: str, detail: str) -> None:
        """Remember the offending *code* alongside a human-readable *detail*."""
        super().__init__(f"{detail}: {code!r}")
        self.code = code
        self.detail = detail


class InvalidCodeFormat(EmojiFormatError):
    """Code does not parse as ``E<hex digits>``."""

    kind = "InvalidCodeFormat"


class OutOfRange(EmojiFormatError):
    """Code decodes outside the U+E000 - U+EFFF window."""

    kind = "OutOfRange"


class EmojiFileError(ValueError):
    """Emoji mapping file is unreadable or malformed."""
