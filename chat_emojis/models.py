"""Pydantic data models for the chat-emojis project."""

from __future__ import annotations

from pydantic import BaseModel, Field, RootModel, field_validator

from chat_emojis.literals import ALIAS_RE, ErrorKind


# Rewrite diagnostics
class RewriteWarning(BaseModel, frozen=True):
    """A registered shortcode that could not be turned into a glyph."""

    alias: str = Field(..., description="Shortcode as it appeared in the message, e.g. ':smile:'.")
    code: str = Field(..., description="Hex code registered for the alias.")
    kind: ErrorKind
    detail: str = Field(..., description="Human-readable reason reported by the formatter.")


class RewriteResult(BaseModel, frozen=True):
    """Outcome of rewriting one chat message."""

    @staticmethod
    def _empty_warnings() -> list[RewriteWarning]:  # noqa: D401
        """Return a new empty RewriteWarning list (precisely typed)."""
        return []

    text: str
    replaced: int = Field(0, ge=0, description="Number of shortcodes replaced by glyphs.")
    warnings: list[RewriteWarning] = Field(default_factory=_empty_warnings)

    @property
    def changed(self) -> bool:
        """``True`` when at least one shortcode was substituted."""
        return self.replaced > 0


# Emoji file
class EmojiFile(RootModel[dict[str, str]]):
    """
    JSON object mapping shortcode aliases to hex codes.

    Example::

        {":smile:": "E001", ":heart:": "E002"}

    Aliases must follow the shortcode grammar.  Codes are not checked here;
    they are validated when used (or eagerly via ``chat-emojis check``).
    """

    @field_validator("root")
    @classmethod
    def _check_aliases(cls, value: dict[str, str]) -> dict[str, str]:
        bad = [alias for alias in value if ALIAS_RE.fullmatch(alias) is None]
        if bad:
            raise ValueError(f"aliases must look like ':name:' (letters, digits, '_'): {bad}")
        return value


__all__ = [
    "EmojiFile",
    "RewriteResult",
    "RewriteWarning",
]
