"""Loading alias -> code pairs from a JSON emoji file."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from chat_emojis.errors import EmojiFileError
from chat_emojis.models import EmojiFile
from chat_emojis.registry import EmojiRegistry, default_registry
from chat_emojis.types import Alias, HexCode

__all__ = [
    "read_emoji_file",
    "load_emoji_file",
]

logger = logging.getLogger(__name__)


def read_emoji_file(path: str | Path) -> dict[Alias, HexCode]:
    """Parse *path* and return its alias -> code mapping."""
    file_path = Path(path)
    try:
        raw = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise EmojiFileError(f"cannot read emoji file {file_path}: {e}") from e

    try:
        emoji_file = EmojiFile.model_validate_json(raw)
    except ValidationError as e:
        raise EmojiFileError(f"invalid emoji file {file_path}: {e}") from e
    return emoji_file.root


def load_emoji_file(path: str | Path, registry: EmojiRegistry | None = None) -> int:
    """Register every entry of *path* on *registry* and return how many were read."""
    emojis = read_emoji_file(path)
    target = registry if registry is not None else default_registry
    target.register_bulk(emojis)
    logger.info("Loaded %d emoji(s) from %s", len(emojis), path)
    return len(emojis)
