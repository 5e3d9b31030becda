"""Alignment and scroll-direction vocabulary."""

from __future__ import annotations

from typing import Literal, TypeAlias

Alignment: TypeAlias = Literal["auto", "start", "center", "end"]
Direction: TypeAlias = Literal["vertical", "horizontal"]
ScrollChangeReason: TypeAlias = Literal["observed", "requested"]


def normalize_alignment(raw: str | None, *, default: Alignment = "auto") -> Alignment:
    """Normalize alignment name, falling back to ``default`` when unset."""
    if raw is None:
        return default
    value = str(raw).strip().lower()
    if not value:
        return default
    if value == "auto":
        return "auto"
    if value == "start":
        return "start"
    if value == "center":
        return "center"
    if value == "end":
        return "end"
    raise ValueError(f"unknown alignment: {raw!r}")


def normalize_direction(raw: str | None) -> Direction:
    """Normalize scroll direction name; unset means vertical."""
    value = "" if raw is None else str(raw).strip().lower()
    if value in {"", "vertical", "y"}:
        return "vertical"
    if value in {"horizontal", "x"}:
        return "horizontal"
    raise ValueError(f"unknown direction: {raw!r}")


__all__ = [
    "Alignment",
    "Direction",
    "ScrollChangeReason",
    "normalize_alignment",
    "normalize_direction",
]
