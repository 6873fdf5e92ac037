"""
Channel identifiers in "<type>/<NN>" form and their validation.
"""
from dataclasses import dataclass
from typing import List, Optional, Union

from x32_remote.config.channel_config import (
    CHANNEL_NUMBER_WIDTH,
    get_channel_range,
    get_channel_types,
    is_channel_type_supported,
)
from x32_remote.model.errors import InvalidChannel


@dataclass(frozen=True)
class Channel:
    """A console strip such as ``ch/03`` or ``bus/12``."""

    type: str
    number: int

    def __str__(self) -> str:
        return f"{self.type}/{self.number:0{CHANNEL_NUMBER_WIDTH}d}"


ChannelLike = Union[str, Channel]


def parse_channel(channel: ChannelLike) -> Channel:
    """
    Parse and validate a channel identifier.

    Accepts ``"bus/05"`` as well as the unpadded ``"bus/5"``. The number part
    must be plain decimal digits within the range of its channel type.
    """
    if isinstance(channel, Channel):
        channel_type, number = channel.type, channel.number
    elif isinstance(channel, str):
        channel_type, sep, digits = channel.partition("/")
        # str.isdigit() also accepts superscripts and other unicode digits
        if not sep or not digits.isascii() or not digits.isdigit():
            raise InvalidChannel(channel)
        number = int(digits)
    else:
        raise InvalidChannel(channel)

    if not is_channel_type_supported(channel_type):
        raise InvalidChannel(channel)
    if isinstance(number, bool) or not isinstance(number, int):
        raise InvalidChannel(channel)

    first, last = get_channel_range(channel_type)
    if not (first <= number <= last):
        raise InvalidChannel(channel)

    return Channel(channel_type, number)


def ensure_channel(channel: ChannelLike) -> str:
    """Validate ``channel`` and return its canonical zero-padded form."""
    return str(parse_channel(channel))


def valid_channels(channel_type: Optional[str] = None) -> List[str]:
    """List every canonical channel identifier, optionally for one type."""
    if channel_type is None:
        types = get_channel_types()
    elif is_channel_type_supported(channel_type):
        types = [channel_type]
    else:
        raise InvalidChannel(channel_type)
    channels = []
    for name in types:
        first, last = get_channel_range(name)
        channels.extend(str(Channel(name, n)) for n in range(first, last + 1))
    return channels
