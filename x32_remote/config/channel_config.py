"""
Console address space: strip categories and their valid channel numbers.
"""
from typing import Dict, List, Tuple


# Channel type -> inclusive (first, last) channel number
CHANNEL_RANGES: Dict[str, Tuple[int, int]] = {
    "ch": (1, 32),      # Input channels
    "auxin": (1, 8),    # Aux inputs
    "fxrtn": (1, 8),    # FX returns
    "bus": (1, 16),     # Mix buses
    "mtx": (1, 6),      # Matrix outputs
}

# Channel numbers are zero-padded to this many digits in OSC addresses
CHANNEL_NUMBER_WIDTH: int = 2


def get_channel_range(channel_type: str) -> Tuple[int, int]:
    """Get the valid number range for a channel type."""
    return CHANNEL_RANGES[channel_type]


def get_channel_types() -> List[str]:
    """Get list of supported channel types."""
    return list(CHANNEL_RANGES.keys())


def is_channel_type_supported(channel_type: str) -> bool:
    """Check if channel type is supported."""
    return channel_type in CHANNEL_RANGES
