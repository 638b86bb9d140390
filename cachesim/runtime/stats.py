from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class SetStats:
    """Per-set breakdown of the run counters."""
    hits: int = 0
    misses: int = 0
    evictions: int = 0


@dataclass
class CacheStats:
    """Hit, miss and eviction counters for a replay. Counters only ever grow."""
    hits: int = 0
    misses: int = 0
    evictions: int = 0
    per_set: List[SetStats] = field(default_factory=list)

    @classmethod
    def for_sets(cls, num_sets: int) -> CacheStats:
        return cls(per_set=[SetStats() for _ in range(num_sets)])

    @property
    def accesses(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        return self.hits / self.accesses if self.accesses else 0.0

    def record_hit(self, set_index: int):
        self.hits += 1
        if self.per_set:
            self.per_set[set_index].hits += 1

    def record_miss(self, set_index: int, evicted: bool):
        self.misses += 1
        if evicted:
            self.evictions += 1
        if self.per_set:
            entry = self.per_set[set_index]
            entry.misses += 1
            if evicted:
                entry.evictions += 1

    def totals(self) -> tuple[int, int, int]:
        return self.hits, self.misses, self.evictions

    def per_set_rows(self) -> List[Dict[str, int]]:
        return [
            {"set": index, "hits": s.hits, "misses": s.misses, "evictions": s.evictions}
            for index, s in enumerate(self.per_set)
        ]
