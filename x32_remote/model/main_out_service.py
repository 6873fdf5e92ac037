"""
Main output routing service bound to a single session.
"""
from x32_remote.model import main_out
from x32_remote.model.channel import ChannelLike
from x32_remote.model.codec import Level
from x32_remote.model.dispatcher import Session
from x32_remote.utils.logger import get_logger


class MainOutService:
    """
    Exposes the main output commands as methods on one session.
    Errors propagate to the caller unchanged.
    """

    def __init__(self, session: Session):
        self.logger = get_logger(__name__)
        self.session = session

    def _run(self, name: str, channel: ChannelLike, *value: Level):
        """Run one catalog command on the bound session and log the result."""
        result = main_out.execute(main_out.COMMANDS[name], self.session, channel, *value)
        self.logger.debug(f"{name}({channel}{', ' + repr(value[0]) if value else ''}) -> {result!r}")
        return result

    def query_stereo_out(self, channel: ChannelLike) -> bool:
        """Query if a channel is routed to the stereo ("LR") main output."""
        return self._run("query_stereo_out", channel)

    def enable_stereo_out(self, channel: ChannelLike) -> bool:
        """Route a channel to the stereo main output. Returns without confirmation."""
        return self._run("enable_stereo_out", channel)

    def disable_stereo_out(self, channel: ChannelLike) -> bool:
        """Remove a channel from the stereo main output. Returns without confirmation."""
        return self._run("disable_stereo_out", channel)

    def query_mono_out(self, channel: ChannelLike) -> bool:
        """Query if a channel is routed to the mono ("MONO/C") main output."""
        return self._run("query_mono_out", channel)

    def enable_mono_out(self, channel: ChannelLike) -> bool:
        """Route a channel to the mono main output. Returns without confirmation."""
        return self._run("enable_mono_out", channel)

    def disable_mono_out(self, channel: ChannelLike) -> bool:
        """Remove a channel from the mono main output. Returns without confirmation."""
        return self._run("disable_mono_out", channel)

    def get_mono_level(self, channel: ChannelLike) -> float:
        """Get the mono output level of a channel as a float in 0.0-1.0."""
        return self._run("get_mono_level", channel)

    def set_mono_level(self, channel: ChannelLike, level: Level) -> bool:
        """Set the mono output level (``int`` 0-160 or ``float`` 0.0-1.0)."""
        return self._run("set_mono_level", channel, level)
