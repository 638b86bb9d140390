from __future__ import annotations
from dataclasses import dataclass, field


def is_power_of_two(n: int) -> bool:
    return (n > 0) and (n & (n - 1) == 0)


@dataclass(frozen=True)
class Geometry:
    """Shape of a set-associative cache: S sets of K lines of B bytes."""
    num_sets: int
    lines_per_set: int
    line_bytes: int

    # Derived properties
    set_index_bits: int = field(init=False)
    block_offset_bits: int = field(init=False)

    def __post_init__(self):
        if not is_power_of_two(self.num_sets):
            raise ValueError("Number of sets must be a positive power of two.")
        if not self.lines_per_set > 0:
            raise ValueError("Lines per set must be positive.")
        if not is_power_of_two(self.line_bytes):
            raise ValueError("Line size must be a positive power of two.")

        # frozen dataclass: derived fields go through object.__setattr__
        object.__setattr__(self, "set_index_bits", self.num_sets.bit_length() - 1)
        object.__setattr__(self, "block_offset_bits", self.line_bytes.bit_length() - 1)

    @property
    def set_index_mask(self) -> int:
        return (1 << self.set_index_bits) - 1


def block_number(address: int, geometry: Geometry) -> int:
    """Full, untruncated memory block number of a byte address."""
    return address >> geometry.block_offset_bits


def decompose_address(address: int, geometry: Geometry) -> tuple[int, int]:
    """Decomposes an address into (set_index, tag).

    With a single set the index mask is zero, so every address lands in set 0.
    """
    set_index = (address >> geometry.block_offset_bits) & geometry.set_index_mask
    tag = address >> (geometry.set_index_bits + geometry.block_offset_bits)
    return set_index, tag
