"""
Address representation for synthetic TLB/cache workloads.

This module defines the fundamental building blocks:
- Address bounds (64-bit unsigned)
- Hex string formatting used on the trace wire format
- Layout constants shared by the generators
"""

# Address layout parameters
ADDRESS_BITS = 64
MAX_ADDRESS = (1 << ADDRESS_BITS) - 1
ADDRESS_WIDTH = 8          # Minimum hex digits after "0x"
ADDRESS_PREFIX = "0x"

# Segments kept free at the bottom of a sequential address space
RESERVED_SEGMENTS = 4


def check_address(value: int) -> int:
    """Validate that value fits in an unsigned 64-bit address"""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Address must be an integer, got {value!r}")
    if value < 0 or value > MAX_ADDRESS:
        raise ValueError(f"Address out of 64-bit range: {value}")
    return value


def format_address(value: int) -> str:
    """
    Format an address as "0x" plus lowercase hex digits.

    Padding guarantees a minimum of ADDRESS_WIDTH digits; wider values
    keep all their digits (0x100000000 formats as "0x100000000").

    Args:
        value: Address in [0, MAX_ADDRESS]

    Returns:
        Formatted address string
    """
    check_address(value)
    return f"{ADDRESS_PREFIX}{value:0{ADDRESS_WIDTH}x}"


def parse_address(text: str) -> int:
    """Inverse of format_address"""
    if not isinstance(text, str) or not text.startswith(ADDRESS_PREFIX):
        raise ValueError(f"Not a hex address: {text!r}")
    digits = text[len(ADDRESS_PREFIX):]
    try:
        value = int(digits, 16)
    except ValueError:
        raise ValueError(f"Not a hex address: {text!r}") from None
    return check_address(value)
