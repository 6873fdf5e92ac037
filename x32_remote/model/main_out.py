"""
Commands that query or modify how channels are routed to the main outputs.

Every function takes a session and a channel name in ``"type/##"`` form (see
``x32_remote.config.channel_config`` for the valid channels). Queries block
until the console replies; set commands return ``True`` as soon as the
message is sent. Use the matching query to check that a change happened.
"""
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Dict, Optional

from x32_remote.config.settings import MONO_LEVEL_MAX
from x32_remote.model.channel import ChannelLike, ensure_channel
from x32_remote.model.codec import (
    Level,
    decode_boolean,
    decode_level,
    encode_boolean,
    encode_level,
)
from x32_remote.model.command import build
from x32_remote.model.dispatcher import CALL, CAST, Session, dispatch_call, dispatch_cast

STEREO_OUT_SUFFIX = "/mix/st"
MONO_OUT_SUFFIX = "/mix/mono"
MONO_LEVEL_SUFFIX = "/mix/mlevel"


@dataclass(frozen=True)
class CommandDescriptor:
    """
    One catalog entry.

    Calls use ``decode`` on the reply. Casts send ``encode(value)`` where
    ``value`` is ``fixed_value`` when the entry has one, otherwise the value
    given by the caller.
    """

    name: str
    suffix: str
    mode: str
    encode: Optional[Callable[[Any], Any]] = None
    decode: Optional[Callable[[Any], Any]] = None
    fixed_value: Optional[Any] = None
    takes_value: bool = False


COMMANDS: Dict[str, CommandDescriptor] = {
    d.name: d
    for d in (
        CommandDescriptor("query_stereo_out", STEREO_OUT_SUFFIX, CALL, decode=decode_boolean),
        CommandDescriptor("enable_stereo_out", STEREO_OUT_SUFFIX, CAST, encode=encode_boolean, fixed_value=True),
        CommandDescriptor("disable_stereo_out", STEREO_OUT_SUFFIX, CAST, encode=encode_boolean, fixed_value=False),
        CommandDescriptor("query_mono_out", MONO_OUT_SUFFIX, CALL, decode=decode_boolean),
        CommandDescriptor("enable_mono_out", MONO_OUT_SUFFIX, CAST, encode=encode_boolean, fixed_value=True),
        CommandDescriptor("disable_mono_out", MONO_OUT_SUFFIX, CAST, encode=encode_boolean, fixed_value=False),
        CommandDescriptor(
            "get_mono_level", MONO_LEVEL_SUFFIX, CALL,
            decode=partial(decode_level, max_int=MONO_LEVEL_MAX),
        ),
        CommandDescriptor(
            "set_mono_level", MONO_LEVEL_SUFFIX, CAST,
            encode=partial(encode_level, max_int=MONO_LEVEL_MAX), takes_value=True,
        ),
    )
}


def execute(descriptor: CommandDescriptor, session: Session, channel: ChannelLike, value: Any = None) -> Any:
    """Validate, build and dispatch one catalog entry."""
    address_channel = ensure_channel(channel)

    if descriptor.mode == CALL:
        reply = dispatch_call(session, build(address_channel, descriptor.suffix))
        return descriptor.decode(reply) if descriptor.decode else reply

    if not descriptor.takes_value:
        value = descriptor.fixed_value
    args = (descriptor.encode(value),) if descriptor.encode else ()
    return dispatch_cast(session, build(address_channel, descriptor.suffix, args))


def query_stereo_out(session: Session, channel: ChannelLike) -> bool:
    """
    Query if a channel is sending audio to the stereo ("LR") main output.

    Returns ``True`` if sending, ``False`` otherwise.
    """
    return execute(COMMANDS["query_stereo_out"], session, channel)


def enable_stereo_out(session: Session, channel: ChannelLike) -> bool:
    """Enable sending a channel's audio to the stereo ("LR") main output."""
    return execute(COMMANDS["enable_stereo_out"], session, channel)


def disable_stereo_out(session: Session, channel: ChannelLike) -> bool:
    """Disable sending a channel's audio to the stereo ("LR") main output."""
    return execute(COMMANDS["disable_stereo_out"], session, channel)


def query_mono_out(session: Session, channel: ChannelLike) -> bool:
    """
    Query if a channel is sending audio to the mono ("MONO/C") main output.

    Returns ``True`` if sending, ``False`` otherwise.
    """
    return execute(COMMANDS["query_mono_out"], session, channel)


def enable_mono_out(session: Session, channel: ChannelLike) -> bool:
    """Enable sending a channel's audio to the mono ("MONO/C") main output."""
    return execute(COMMANDS["enable_mono_out"], session, channel)


def disable_mono_out(session: Session, channel: ChannelLike) -> bool:
    """Disable sending a channel's audio to the mono ("MONO/C") main output."""
    return execute(COMMANDS["disable_mono_out"], session, channel)


def get_mono_level(session: Session, channel: ChannelLike) -> float:
    """
    Get the mono ("MONO/C") output level of a channel.

    The console stores this as an integer from 0 (silent) to 160 (maximum);
    the result is that value divided by 160. Multiply by 160 and round to get
    the device setting back.
    """
    return execute(COMMANDS["get_mono_level"], session, channel)


def set_mono_level(session: Session, channel: ChannelLike, level: Level) -> bool:
    """
    Set the mono ("MONO/C") output level of a channel.

    ``level`` is either an ``int`` device value in ``[0, 160]`` or a ``float``
    in ``[0.0, 1.0]``. Floats are rounded to the nearest device step, so a
    later ``get_mono_level`` may not return exactly the value given here.
    """
    return execute(COMMANDS["set_mono_level"], session, channel, level)
