"""
Remote control of X32 digital mixing consoles over OSC.
"""
from x32_remote.model.channel import Channel, ensure_channel, parse_channel, valid_channels
from x32_remote.model.codec import (
    DeviceLevel,
    NormalizedLevel,
    decode_boolean,
    decode_level,
    encode_boolean,
    encode_level,
)
from x32_remote.model.errors import (
    InvalidChannel,
    OutOfRange,
    SessionError,
    UnexpectedReplyType,
    X32Error,
)
from x32_remote.model.main_out import (
    disable_mono_out,
    disable_stereo_out,
    enable_mono_out,
    enable_stereo_out,
    get_mono_level,
    query_mono_out,
    query_stereo_out,
    set_mono_level,
)
from x32_remote.model.main_out_service import MainOutService
from x32_remote.model.osc_session import X32OSCSession
from x32_remote.model.simulator import SimulatedConsoleSession

__version__ = "1.0.0"
