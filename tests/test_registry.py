"""Tests for the alias registry and the process-wide registration helpers."""

import threading

import pytest

from chat_emojis import registry as _r
from chat_emojis.registry import EmojiRegistry


def test_register_then_lookup(registry: EmojiRegistry) -> None:
    """A just-registered alias is immediately visible."""
    registry.register(":smile:", "E001")
    assert registry.lookup(":smile:") == "E001"
    assert ":smile:" in registry
    assert len(registry) == 1


def test_last_write_wins(registry: EmojiRegistry) -> None:
    """Registering the same alias twice keeps only the second code."""
    registry.register(":heart:", "E002")
    registry.register(":heart:", "E003")
    assert registry.lookup(":heart:") == "E003"
    assert len(registry) == 1


def test_lookup_missing(registry: EmojiRegistry) -> None:  # noqa: D103
    assert registry.lookup(":nope:") is None
    assert ":nope:" not in registry


def test_lookup_is_case_sensitive(registry: EmojiRegistry) -> None:  # noqa: D103
    registry.register(":Smile:", "E001")
    assert registry.lookup(":smile:") is None


def test_codes_not_validated_on_register(registry: EmojiRegistry) -> None:
    """Malformed codes are accepted at registration time."""
    registry.register(":bad:", "ZZZZ")
    assert registry.lookup(":bad:") == "ZZZZ"


def test_register_bulk(registry: EmojiRegistry) -> None:  # noqa: D103
    registry.register(":a:", "E000")
    registry.register_bulk({":a:": "E010", ":b:": "E011"})
    assert registry.snapshot() == {":a:": "E010", ":b:": "E011"}


def test_snapshot_is_a_copy(registry: EmojiRegistry) -> None:  # noqa: D103
    registry.register(":a:", "E000")
    snap = registry.snapshot()
    snap[":b:"] = "E001"
    assert ":b:" not in registry


def test_seeded_constructor() -> None:  # noqa: D103
    reg = EmojiRegistry({":x:": "E00A"})
    assert reg.lookup(":x:") == "E00A"


def test_concurrent_register_and_lookup(registry: EmojiRegistry) -> None:
    """Readers and writers running side by side never corrupt the mapping."""
    errors: list[BaseException] = []
    n_writers, per_writer = 4, 250

    def writer(w: int) -> None:
        try:
            for i in range(per_writer):
                registry.register(f":w{w}_{i}:", f"E{i:03X}")
        except BaseException as e:  # pragma: no cover - only on failure
            errors.append(e)

    def reader() -> None:
        try:
            for _ in range(per_writer):
                for alias, code in registry.snapshot().items():
                    assert alias.startswith(":w")
                    assert code.startswith("E")
                registry.lookup(":w0_0:")
        except BaseException as e:  # pragma: no cover - only on failure
            errors.append(e)

    threads = [threading.Thread(target=writer, args=(w,)) for w in range(n_writers)]
    threads += [threading.Thread(target=reader) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert len(registry) == n_writers * per_writer


def test_module_level_helpers(monkeypatch: pytest.MonkeyPatch) -> None:
    """``add_emoji``/``add_emojis`` write to the process-wide registry."""
    fresh = EmojiRegistry()
    monkeypatch.setattr(_r, "default_registry", fresh)

    _r.add_emoji(":smile:", "E001")
    _r.add_emojis({":heart:": "E002", ":smile:": "E005"})

    assert fresh.snapshot() == {":smile:": "E005", ":heart:": "E002"}
