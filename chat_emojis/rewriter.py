"""
Chat message rewriting - replaces ``:alias:`` shortcodes with emoji glyphs.

``ChatRewriter`` does the actual substitution and reports per-token failures
as ``RewriteWarning`` objects.  ``EmojiHandler`` is the hook handed to the
host's chat dispatch; it edits the outgoing message in place and never lets
an exception escape.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, TypeAlias, runtime_checkable

from chat_emojis.errors import EmojiFormatError
from chat_emojis.formatter import emoji_format
from chat_emojis.literals import ALIAS_RE
from chat_emojis.models import RewriteResult, RewriteWarning
from chat_emojis.registry import EmojiRegistry, default_registry

__all__ = [
    "EMOJI_PATTERN",
    "ChatMessage",
    "ChatRewriter",
    "EmojiHandler",
    "MessageRef",
]

logger = logging.getLogger(__name__)

EMOJI_PATTERN = ALIAS_RE

WarningCallback: TypeAlias = Callable[[RewriteWarning], None]


# ---------------------------------------------------------------------------
# Message holders ------------------------------------------------------------
# ---------------------------------------------------------------------------


@runtime_checkable
class MessageRef(Protocol):
    """Anything carrying a writable ``text`` attribute (the outgoing chat line)."""

    text: str


@dataclass
class ChatMessage:
    """Mutable chat message owned by the host for one dispatch."""

    text: str


# ---------------------------------------------------------------------------
# Rewriter -------------------------------------------------------------------
# ---------------------------------------------------------------------------


class ChatRewriter:
    """Substitute registered shortcodes in chat text."""

    def __init__(
        self,
        registry: EmojiRegistry | None = None,
        *,
        on_warning: WarningCallback | None = None,
    ) -> None:
        """Bind to *registry* (process-wide one by default) and an optional warning sink."""
        self.registry = registry if registry is not None else default_registry
        self.on_warning = on_warning

    def rewrite(self, message: str) -> RewriteResult:
        """
        Return *message* with every resolvable shortcode replaced.

        Tokens are found left to right without overlap.  Unregistered aliases
        are left alone silently; registered aliases whose code fails to format
        are left alone too and reported in ``RewriteResult.warnings``.
        """
        warnings: list[RewriteWarning] = []
        replaced = 0

        def _substitute(match: re.Match[str]) -> str:
            nonlocal replaced
            alias = match.group(0)
            code = self.registry.lookup(alias)
            if code is None:
                return alias
            try:
                glyph = emoji_format(code)
            except EmojiFormatError as e:
                warning = RewriteWarning(alias=alias, code=code, kind=e.kind, detail=e.detail)
                logger.warning("Error converting %s: %s", alias, e)
                warnings.append(warning)
                if self.on_warning is not None:
                    try:
                        self.on_warning(warning)
                    except Exception:
                        logger.exception("Warning callback failed for %s", alias)
                return alias
            replaced += 1
            return glyph

        text = EMOJI_PATTERN.sub(_substitute, message)
        return RewriteResult(text=text, replaced=replaced, warnings=warnings)

    def rewrite_text(self, message: str) -> str:  # noqa: D401
        """Shorthand for ``rewrite(message).text``."""
        return self.rewrite(message).text


# ---------------------------------------------------------------------------
# Host hook ------------------------------------------------------------------
# ---------------------------------------------------------------------------


class EmojiHandler:
    """Chat-event handler that swaps shortcodes for glyphs before broadcast."""

    def __init__(self, rewriter: ChatRewriter | None = None) -> None:
        """Use *rewriter*, or one bound to the process-wide registry."""
        self.rewriter = rewriter or ChatRewriter()

    def handle_chat(self, ctx: Any, msg: MessageRef) -> None:  # noqa: ARG002
        """Rewrite ``msg.text`` in place.  *ctx* is the host's per-event context."""
        try:
            result = self.rewriter.rewrite(msg.text)
            msg.text = result.text
        except Exception:
            logger.exception("Emoji rewrite failed; message left unchanged")
            return
        if result.changed:
            logger.debug("Replaced %d emoji shortcode(s)", result.replaced)
