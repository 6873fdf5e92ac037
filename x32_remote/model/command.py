"""
OSC command construction from a channel, an address suffix and arguments.
"""
from typing import NamedTuple, Sequence, Tuple, Union

Scalar = Union[int, float]


class Command(NamedTuple):
    """An OSC address together with its encoded arguments."""

    address: str
    args: Tuple[Scalar, ...]


def build_address(channel: str, suffix: str) -> str:
    """Join a validated channel and an operation suffix into an OSC address."""
    # OSC addresses are rooted: "/bus/05" + "/mix/st"
    return f"/{channel}{suffix}"


def build(channel: str, suffix: str, args: Sequence[Scalar] = ()) -> Command:
    """Build a command for an already validated, canonical channel."""
    return Command(build_address(channel, suffix), tuple(args))
