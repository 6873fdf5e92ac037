"""
Call/cast dispatch of built commands through a session.

A *call* sends a query and blocks until the session hands back the reply.
A *cast* sends a change and returns straight away; it says nothing about the
console's actual state, so callers that need confirmation issue a call
afterwards. Session failures propagate unchanged.
"""
from typing import Any, Protocol, Sequence

from x32_remote.model.command import Command, Scalar


class Session(Protocol):
    """Anything able to transmit OSC commands to a console."""

    def call(self, address: str, args: Sequence[Scalar]) -> Any:
        ...

    def cast(self, address: str, args: Sequence[Scalar]) -> Any:
        ...


CALL = "call"
CAST = "cast"


def dispatch_call(session: Session, command: Command) -> Any:
    """Send ``command`` and return the raw reply value."""
    return session.call(command.address, command.args)


def dispatch_cast(session: Session, command: Command) -> bool:
    """Send ``command`` without waiting for a reply. Returns ``True``."""
    session.cast(command.address, command.args)
    return True
