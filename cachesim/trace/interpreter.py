from __future__ import annotations
from typing import Callable, Iterable, Iterator, List, Optional

from ..cache.geometry import Geometry, block_number
from ..runtime.simulator import AccessResult, SimContext, simulate_access
from ..runtime.stats import CacheStats
from ..utils.logging import get_logger
from .parser import Op, TraceRecord, parse_record

logger = get_logger(__name__)

RecordCallback = Callable[[TraceRecord, List[AccessResult]], None]


def line_accesses(address: int, size: int, geometry: Geometry) -> Iterator[int]:
    """
    Yields one address per distinct cache line touched by bytes
    [address, address + size - 1], in ascending order.

    Consecutive bytes are compared by their full block number; a value masked
    down to a few low bits can equate two different blocks.
    """
    prev_block = None
    for offset in range(size):
        byte_addr = address + offset
        block = block_number(byte_addr, geometry)
        if block != prev_block:
            prev_block = block
            yield byte_addr


def process_record(ctx: SimContext, record: TraceRecord) -> List[AccessResult]:
    """Runs the line accesses of one record; a modify runs them twice (read then write)."""
    passes = 2 if record.op is Op.MODIFY else 1
    results = []
    for _ in range(passes):
        for addr in line_accesses(record.address, record.size, ctx.geometry):
            results.append(simulate_access(ctx, addr))
    return results


def replay(ctx: SimContext, stream: Iterable[str],
           on_record: Optional[RecordCallback] = None) -> CacheStats:
    """
    Replays a whole trace against `ctx`, strictly in order.

    `on_record` is called after each data record with the per-access results;
    the CLI uses it for verbose output.
    """
    records = 0
    for lineno, line in enumerate(stream, start=1):
        record = parse_record(line, lineno)
        if record is None:
            continue
        results = process_record(ctx, record)
        records += 1
        if on_record is not None:
            on_record(record, results)

    logger.debug("Replayed %d records, %d line accesses", records, ctx.stats.accesses)
    return ctx.stats
