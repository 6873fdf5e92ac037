"""
Error kinds raised by the command layer and by sessions.
"""
from typing import Any, Tuple


class X32Error(Exception):
    """Base class for every error raised by x32_remote."""


class InvalidChannel(X32Error, ValueError):
    """Channel identifier is not part of the console's address space."""

    def __init__(self, channel: Any):
        super().__init__(f"Invalid channel: {channel!r}")
        self.channel = channel


class OutOfRange(X32Error, ValueError):
    """Value lies outside every domain accepted for a setting."""

    def __init__(self, value: Any, valid: Tuple[Any, ...]):
        ranges = " or ".join(f"[{low}, {high}]" for low, high in valid)
        super().__init__(f"Value {value!r} out of range, expected {ranges}")
        self.value = value
        self.valid = valid


class UnexpectedReplyType(X32Error, TypeError):
    """Reply from the console could not be read as the expected scalar."""

    def __init__(self, reply: Any, expected: str = "number"):
        super().__init__(f"Expected {expected} in reply, got {reply!r}")
        self.reply = reply
        self.expected = expected


class SessionError(X32Error):
    """Transport failure, timeout or closed session."""
