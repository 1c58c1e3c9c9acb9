"""Configuration for arraytable tables."""

from __future__ import annotations

from dataclasses import dataclass

GROWTH_POLICIES = ("fixed", "double")


@dataclass
class TableConfig:
    """Sizing policy for the array backing an ArrayTable."""

    capacity: int = 1024
    growth: str = "fixed"  # 'fixed' or 'double'
    low: int = 0

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {self.capacity}")
        if self.growth not in GROWTH_POLICIES:
            raise ValueError(
                f"Unknown growth policy '{self.growth}'; expected one of {list(GROWTH_POLICIES)}"
            )

    @property
    def high(self) -> int:
        return self.low + self.capacity - 1
