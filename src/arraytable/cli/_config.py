"""CLI helpers for resolving table configuration from the environment."""

from __future__ import annotations

import os

from arraytable.config import TableConfig


def _int_from_env(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from None


def config_from_env(
    *,
    capacity: int | None = None,
    growth: str | None = None,
    low: int | None = None,
    fallback: TableConfig | None = None,
) -> TableConfig:
    """Build a TableConfig.

    Explicit arguments win over ARRAYTABLE_* variables, which win over
    ``fallback`` (the TableConfig defaults when omitted).
    """
    defaults = fallback or TableConfig()
    if capacity is None:
        capacity = _int_from_env("ARRAYTABLE_CAPACITY")
    if low is None:
        low = _int_from_env("ARRAYTABLE_LOW")
    if growth is None:
        growth = os.getenv("ARRAYTABLE_GROWTH") or None
    return TableConfig(
        capacity=capacity if capacity is not None else defaults.capacity,
        growth=growth if growth is not None else defaults.growth,
        low=low if low is not None else defaults.low,
    )
