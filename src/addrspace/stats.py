"""
Trace statistics for generated address streams.

Summarizes locality of a trace before it is handed to a cache/TLB
simulator: how many distinct addresses it touches and how often
addresses repeat.
"""

from typing import Iterable

from .address import check_address, format_address, parse_address


class TraceStats:
    """Collect statistics over an address trace"""

    def __init__(self, values: Iterable[int] = ()):
        self.total = 0
        self.min_address = 0
        self.max_address = 0
        self.unique_values = set()
        for value in values:
            self.record(value)

    @classmethod
    def from_addresses(cls, addresses: Iterable[str]) -> "TraceStats":
        """Build stats from formatted address strings"""
        return cls(parse_address(address) for address in addresses)

    def record(self, value: int):
        """Record one emitted address"""
        check_address(value)
        if self.total == 0:
            self.min_address = self.max_address = value
        else:
            self.min_address = min(self.min_address, value)
            self.max_address = max(self.max_address, value)
        self.total += 1
        self.unique_values.add(value)

    @property
    def unique(self) -> int:
        return len(self.unique_values)

    @property
    def reuse_ratio(self) -> float:
        """Fraction of emissions that repeat an earlier address"""
        if not self.total:
            return 0.0
        return 1.0 - self.unique / self.total

    def segments_touched(self, segment_size: int) -> int:
        """Number of distinct segment_size-aligned blocks in the trace"""
        if segment_size <= 0:
            raise ValueError(f"Segment size must be positive: {segment_size}")
        return len({value // segment_size for value in self.unique_values})

    def print_summary(self, label: str = "Trace"):
        """Print trace summary"""
        print(f"\n=== {label} Statistics ===")
        print(f"Addresses: {self.total}")
        print(f"Unique: {self.unique}")
        print(f"Reuse ratio: {self.reuse_ratio:.2%}")
        if self.total:
            print(f"Range: {format_address(self.min_address)} - {format_address(self.max_address)}")
        print("=" * 30)
