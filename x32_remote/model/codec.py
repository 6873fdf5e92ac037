"""
Conversion between semantic values and the console's native encodings.

Booleans travel as integer 0/1. Levels are stored by the console as an
integer in ``[0, max_int]`` and exposed to callers as a float in
``[0.0, 1.0]``. ``encode_level`` accepts both forms and tells them apart by
representation: ``1`` is device unit one, ``1.0`` is full scale.
"""
import math
import numbers
from typing import Any, Union

from x32_remote.model.errors import OutOfRange, UnexpectedReplyType


class DeviceLevel(int):
    """A level given explicitly as a raw device integer."""


class NormalizedLevel(float):
    """A level given explicitly as a fraction of full scale."""


Level = Union[int, float, DeviceLevel, NormalizedLevel]


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def encode_boolean(value: bool) -> int:
    """Encode a flag as 1 (on) or 0 (off)."""
    return 1 if value else 0


def decode_boolean(wire_value: Any) -> bool:
    """Decode a numeric flag from the console; any nonzero value is on."""
    if isinstance(wire_value, bool):
        return wire_value
    if not _is_number(wire_value):
        raise UnexpectedReplyType(wire_value, "numeric flag")
    return wire_value != 0


def _round_half_up(value: float) -> int:
    # Ties go away from zero: 2.5 -> 3
    whole = math.floor(value)
    return int(whole) + (1 if value - whole >= 0.5 else 0)


def encode_level(value: Level, max_int: int) -> int:
    """
    Encode a level for the console.

    An ``int`` in ``[0, max_int]`` is already a device value and is returned
    unchanged. Anything else is read as a normalized level: it must be a
    real number in ``[0.0, 1.0]`` and is scaled to ``round(value * max_int)``.
    """
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        if 0 <= value <= max_int:
            return int(value)
        if isinstance(value, DeviceLevel):
            raise OutOfRange(value, ((0, max_int),))

    if _is_number(value) and not isinstance(value, DeviceLevel):
        normalized = float(value)
        # NaN fails both comparisons
        if 0.0 <= normalized <= 1.0:
            return _round_half_up(normalized * max_int)

    raise OutOfRange(value, ((0, max_int), (0.0, 1.0)))


def decode_level(wire_value: Any, max_int: int) -> float:
    """Decode a device integer into a normalized level ``wire_value / max_int``."""
    if not _is_number(wire_value):
        raise UnexpectedReplyType(wire_value, "numeric level")
    if not (0 <= wire_value <= max_int):
        raise OutOfRange(wire_value, ((0, max_int),))
    return wire_value / max_int
