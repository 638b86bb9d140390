from __future__ import annotations
from typing import List

from .geometry import Geometry
from ..utils.logging import get_logger

logger = get_logger(__name__)


class CacheLine:
    """Represents a single way in a cache set."""
    __slots__ = ("valid", "tag", "timestamp")

    def __init__(self):
        self.valid = False
        self.tag = -1
        self.timestamp = 0

    def fill(self, tag: int, timestamp: int):
        """Installs a block in this way, replacing whatever was resident."""
        self.valid = True
        self.tag = tag
        self.timestamp = timestamp

    def __repr__(self):
        return f"CacheLine(valid={self.valid}, tag={self.tag:#x}, timestamp={self.timestamp})"


class CacheSet:
    """A fixed number of lines. A line's position in `lines` is its way index."""

    def __init__(self, associativity: int):
        self.lines: List[CacheLine] = [CacheLine() for _ in range(associativity)]

    def __len__(self):
        return len(self.lines)

    def probe(self, tag: int) -> tuple[int | None, int | None]:
        """
        Scans the set once. Returns (hit_way, first_empty_way), either of which
        may be None. The scan stops at the first valid line holding `tag`.
        """
        first_empty = None
        for way, line in enumerate(self.lines):
            if not line.valid:
                if first_empty is None:
                    first_empty = way
                continue
            if line.tag == tag:
                return way, first_empty
        return None, first_empty

    def oldest_way(self) -> int:
        """Way with the smallest timestamp; ties go to the lowest way index."""
        # min() keeps the first of equal keys
        return min(range(len(self.lines)), key=lambda way: self.lines[way].timestamp)

    def resident_tags(self) -> List[int]:
        return [line.tag for line in self.lines if line.valid]


class CacheStore:
    """The S x K grid of line metadata, sized once from a Geometry."""

    def __init__(self, geometry: Geometry):
        self.geometry = geometry
        self.sets: List[CacheSet] = [CacheSet(geometry.lines_per_set) for _ in range(geometry.num_sets)]
        logger.debug("Allocated cache store: %d sets x %d lines x %d bytes",
                     geometry.num_sets, geometry.lines_per_set, geometry.line_bytes)

    def __getitem__(self, set_index: int) -> CacheSet:
        return self.sets[set_index]

    def __len__(self):
        return len(self.sets)

    def valid_lines(self) -> int:
        return sum(1 for cache_set in self.sets for line in cache_set.lines if line.valid)

    def reset(self):
        """Invalidates every line without reallocating."""
        for cache_set in self.sets:
            for line in cache_set.lines:
                line.valid = False
                line.tag = -1
                line.timestamp = 0
