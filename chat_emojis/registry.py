"""
Alias registry mapping ``:alias:`` shortcodes to ``E<hex>`` codes.

Codes are stored as given; they are only validated when a chat message
actually uses them.  The registry is shared between every chat handler so
all access goes through a single lock.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping

from chat_emojis.types import Alias, HexCode

__all__ = [
    "EmojiRegistry",
    "default_registry",
    "add_emoji",
    "add_emojis",
]

logger = logging.getLogger(__name__)


class EmojiRegistry:
    """Thread-safe alias -> code mapping.  Entries are never removed."""

    def __init__(self, emojis: Mapping[Alias, HexCode] | None = None) -> None:
        """Create a registry, optionally seeded with *emojis*."""
        self._lock = threading.Lock()
        self._emojis: dict[Alias, HexCode] = dict(emojis or {})

    def register(self, alias: Alias, code: HexCode) -> None:
        """Associate *alias* (e.g. ``":heart:"``) with *code*; later calls overwrite."""
        with self._lock:
            previous = self._emojis.get(alias)
            self._emojis[alias] = code
        if previous is not None and previous != code:
            logger.debug("Emoji %s remapped %s -> %s", alias, previous, code)

    def register_bulk(self, emojis: Mapping[Alias, HexCode]) -> None:
        """Register every entry of *emojis* in one step."""
        with self._lock:
            self._emojis.update(emojis)
        logger.debug("Registered %d emoji(s)", len(emojis))

    def lookup(self, alias: Alias) -> HexCode | None:
        """Return the code registered for *alias*, or ``None``."""
        with self._lock:
            return self._emojis.get(alias)

    def snapshot(self) -> dict[Alias, HexCode]:
        """Return a point-in-time copy safe to iterate."""
        with self._lock:
            return dict(self._emojis)

    def __contains__(self, alias: object) -> bool:
        with self._lock:
            return alias in self._emojis

    def __len__(self) -> int:
        with self._lock:
            return len(self._emojis)


# ---------------------------------------------------------------------------
# Process-wide registry ------------------------------------------------------
# ---------------------------------------------------------------------------

default_registry = EmojiRegistry()


def add_emoji(alias: Alias, code: HexCode) -> None:
    """Register *alias* -> *code* on the process-wide registry."""
    default_registry.register(alias, code)


def add_emojis(emojis: Mapping[Alias, HexCode]) -> None:
    """Register many aliases at once on the process-wide registry."""
    default_registry.register_bulk(emojis)
