from __future__ import annotations
from enum import Enum


class ReplacementPolicy(Enum):
    """Eviction policy. Both evict the line with the oldest timestamp; they differ
    only in whether a hit refreshes that timestamp."""
    FIFO = "FIFO"
    LRU = "LRU"

    @property
    def refresh_on_hit(self) -> bool:
        return self is ReplacementPolicy.LRU

    @classmethod
    def parse(cls, name: str | ReplacementPolicy) -> ReplacementPolicy:
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).upper())
        except ValueError:
            raise ValueError(f"Policy must be FIFO or LRU, got {name!r}") from None
