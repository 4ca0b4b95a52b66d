"""Canonical type aliases used throughout the project."""

from __future__ import annotations

from typing import TypeAlias

Alias: TypeAlias = str  # e.g. ":smile:" (colons included)
HexCode: TypeAlias = str  # e.g. "E001"
Glyph: TypeAlias = str  # single private-use character
