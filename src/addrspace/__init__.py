"""Address formatting and trace statistics for workload generation."""

from .address import (
    check_address, format_address, parse_address,
    ADDRESS_BITS, ADDRESS_WIDTH, MAX_ADDRESS, RESERVED_SEGMENTS
)
from .stats import TraceStats

__all__ = [
    'check_address',
    'format_address',
    'parse_address',
    'TraceStats',
    'ADDRESS_BITS',
    'ADDRESS_WIDTH',
    'MAX_ADDRESS',
    'RESERVED_SEGMENTS',
]
