"""Chat-emojis public package namespace."""

from chat_emojis.config import load_emoji_file, read_emoji_file
from chat_emojis.errors import EmojiFileError, EmojiFormatError, InvalidCodeFormat, OutOfRange
from chat_emojis.formatter import emoji_format, is_valid_code
from chat_emojis.models import RewriteResult, RewriteWarning
from chat_emojis.registry import EmojiRegistry, add_emoji, add_emojis, default_registry
from chat_emojis.rewriter import EMOJI_PATTERN, ChatMessage, ChatRewriter, EmojiHandler, MessageRef

__all__: list[str] = [
    "EMOJI_PATTERN",
    "ChatMessage",
    "ChatRewriter",
    "EmojiFileError",
    "EmojiFormatError",
    "EmojiHandler",
    "EmojiRegistry",
    "InvalidCodeFormat",
    "MessageRef",
    "OutOfRange",
    "RewriteResult",
    "RewriteWarning",
    "add_emoji",
    "add_emojis",
    "default_registry",
    "emoji_format",
    "is_valid_code",
    "load_emoji_file",
    "read_emoji_file",
]
