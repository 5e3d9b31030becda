"""Centralized configuration ownership for vlist defaults."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

from vlist.api.alignment import Alignment, normalize_alignment

DEFAULT_ESTIMATED_ITEM_SIZE = 50.0
DEFAULT_OVERSCAN_COUNT = 3


@dataclass(frozen=True, slots=True)
class VlistLoggingSettings:
    level_name: str
    console_format: str
    file_path: str | None


@dataclass(frozen=True, slots=True)
class VlistConfig:
    """Immutable vlist configuration."""

    estimated_item_size: float
    overscan_count: int
    scroll_alignment: Alignment
    metrics_enabled: bool
    measure_trace_enabled: bool
    logging: VlistLoggingSettings


_CONFIG: ContextVar[VlistConfig | None] = ContextVar("vlist_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if value != value:
        value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _alignment(name: str, *, env: Mapping[str, str] | None = None) -> Alignment:
    try:
        return normalize_alignment(_raw(name, env=env))
    except ValueError:
        return "auto"


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with vlist-prefixed override."""
    value = _raw("VLIST_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = default
    return value.strip().upper()


def load_config(*, env: Mapping[str, str] | None = None) -> VlistConfig:
    """Load immutable configuration from env vars or an explicit mapping."""
    file_path = _text("VLIST_LOG_FILE", "", env=env)
    return VlistConfig(
        estimated_item_size=_float(
            "VLIST_ESTIMATED_ITEM_SIZE", DEFAULT_ESTIMATED_ITEM_SIZE, minimum=1.0, env=env
        ),
        overscan_count=_int("VLIST_OVERSCAN_COUNT", DEFAULT_OVERSCAN_COUNT, minimum=0, env=env),
        scroll_alignment=_alignment("VLIST_SCROLL_ALIGNMENT", env=env),
        metrics_enabled=_flag("VLIST_METRICS_ENABLED", False, env=env),
        measure_trace_enabled=_flag("VLIST_MEASURE_TRACE", False, env=env),
        logging=VlistLoggingSettings(
            level_name=resolve_log_level_name(env=env),
            console_format=_text("VLIST_LOG_FORMAT", "text", env=env).lower(),
            file_path=file_path if file_path else None,
        ),
    )


def initialize_config(*, env: Mapping[str, str] | None = None) -> VlistConfig:
    config = load_config(env=env)
    _CONFIG.set(config)
    return config


def set_config(config: VlistConfig) -> VlistConfig:
    _CONFIG.set(config)
    return config


def get_config() -> VlistConfig:
    config = _CONFIG.get()
    if config is not None:
        return config
    return initialize_config()


__all__ = [
    "DEFAULT_ESTIMATED_ITEM_SIZE",
    "DEFAULT_OVERSCAN_COUNT",
    "VlistConfig",
    "VlistLoggingSettings",
    "get_config",
    "initialize_config",
    "load_config",
    "resolve_log_level_name",
    "set_config",
]
