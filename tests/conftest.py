"""Pytest configuration and shared fixtures."""

import pytest

from chat_emojis.registry import EmojiRegistry


@pytest.fixture()
def registry() -> EmojiRegistry:
    """Return a brand-new, empty registry isolated from the process-wide one."""
    return EmojiRegistry()
