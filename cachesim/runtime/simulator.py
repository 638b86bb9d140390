from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from ..cache.geometry import Geometry, decompose_address
from ..cache.policy import ReplacementPolicy
from ..cache.store import CacheStore
from ..utils.logging import get_logger
from .stats import CacheStats

logger = get_logger(__name__)


class AccessResult(Enum):
    HIT = "hit"
    MISS = "miss"
    MISS_EVICTION = "miss eviction"


@dataclass
class SimContext:
    """
    Mutable state of one replay: the cache store, the counters and the global
    access clock. The clock advances by one on every simulated line access and
    is the only source of line timestamps.
    """
    geometry: Geometry
    policy: ReplacementPolicy
    store: CacheStore = field(init=False)
    stats: CacheStats = field(init=False)
    clock: int = 0

    def __post_init__(self):
        self.policy = ReplacementPolicy.parse(self.policy)
        self.store = CacheStore(self.geometry)
        self.stats = CacheStats.for_sets(self.geometry.num_sets)

    def tick(self) -> int:
        now = self.clock
        self.clock += 1
        return now


def simulate_access(ctx: SimContext, address: int) -> AccessResult:
    """
    Simulates one cache-line access and updates the store and counters.

    The victim of a full set is always the line with the smallest timestamp
    (lowest way index on ties). FIFO never refreshes timestamps on a hit, so that
    line is the oldest inserted one; LRU refreshes on every hit, so it is the
    least recently used one.
    """
    set_index, tag = decompose_address(address, ctx.geometry)
    cache_set = ctx.store[set_index]

    hit_way, first_empty = cache_set.probe(tag)

    if hit_way is not None:
        now = ctx.tick()
        if ctx.policy.refresh_on_hit:
            cache_set.lines[hit_way].timestamp = now
        ctx.stats.record_hit(set_index)
        return AccessResult.HIT

    if first_empty is not None:
        cache_set.lines[first_empty].fill(tag, ctx.tick())
        ctx.stats.record_miss(set_index, evicted=False)
        return AccessResult.MISS

    victim_way = cache_set.oldest_way()
    victim = cache_set.lines[victim_way]
    logger.debug("Evicting tag %#x from set %d way %d", victim.tag, set_index, victim_way)
    victim.fill(tag, ctx.tick())
    ctx.stats.record_miss(set_index, evicted=True)
    return AccessResult.MISS_EVICTION
