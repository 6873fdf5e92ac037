"""Tests for x32_remote.model.channel."""

from __future__ import annotations

import pytest

from x32_remote.model.channel import Channel, ensure_channel, parse_channel, valid_channels
from x32_remote.model.errors import InvalidChannel


class TestEnsureChannel:
    @pytest.mark.parametrize("channel", valid_channels())
    def test_valid_channels_returned_unchanged(self, channel: str) -> None:
        assert ensure_channel(channel) == channel

    @pytest.mark.parametrize(
        "channel, expected",
        [("ch/3", "ch/03"), ("bus/5", "bus/05"), ("ch/017", "ch/17"), ("mtx/1", "mtx/01")],
    )
    def test_unpadded_numbers_are_normalized(self, channel: str, expected: str) -> None:
        assert ensure_channel(channel) == expected

    @pytest.mark.parametrize(
        "channel",
        [
            "ch/00",
            "ch/33",
            "bus/17",
            "auxin/09",
            "fxrtn/09",
            "mtx/07",
            "dca/01",
            "main/st",
            "CH/01",
            "ch01",
            "ch/",
            "/ch/01",
            "ch/01/",
            "ch/-1",
            "ch/+1",
            "ch/ 1",
            "ch/1.0",
            "ch/¹",
            "",
        ],
    )
    def test_invalid_channel_strings(self, channel: str) -> None:
        with pytest.raises(InvalidChannel) as excinfo:
            ensure_channel(channel)
        assert excinfo.value.channel == channel

    @pytest.mark.parametrize("channel", [None, 5, b"ch/01", ("ch", 1)])
    def test_non_string_values_rejected(self, channel: object) -> None:
        with pytest.raises(InvalidChannel):
            ensure_channel(channel)  # type: ignore[arg-type]

    def test_invalid_channel_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            ensure_channel("bus/99")


class TestParseChannel:
    def test_parse_returns_channel(self) -> None:
        assert parse_channel("bus/12") == Channel("bus", 12)

    def test_channel_str_is_zero_padded(self) -> None:
        assert str(Channel("ch", 3)) == "ch/03"
        assert str(Channel("ch", 32)) == "ch/32"

    def test_channel_object_accepted(self) -> None:
        assert ensure_channel(Channel("fxrtn", 8)) == "fxrtn/08"

    def test_channel_object_out_of_range(self) -> None:
        with pytest.raises(InvalidChannel):
            ensure_channel(Channel("fxrtn", 9))

    def test_channel_object_bool_number(self) -> None:
        with pytest.raises(InvalidChannel):
            ensure_channel(Channel("ch", True))  # type: ignore[arg-type]

    def test_channel_is_immutable(self) -> None:
        channel = Channel("ch", 1)
        with pytest.raises(AttributeError):
            channel.number = 2  # type: ignore[misc]


class TestValidChannels:
    def test_counts_per_type(self) -> None:
        assert len(valid_channels("ch")) == 32
        assert len(valid_channels("bus")) == 16
        assert len(valid_channels("mtx")) == 6
        assert len(valid_channels()) == 32 + 8 + 8 + 16 + 6

    def test_bounds(self) -> None:
        buses = valid_channels("bus")
        assert buses[0] == "bus/01"
        assert buses[-1] == "bus/16"

    @pytest.mark.parametrize("channel_type", ["dca", "", "CH", "main"])
    def test_unknown_type_rejected(self, channel_type: str) -> None:
        with pytest.raises(InvalidChannel) as excinfo:
            valid_channels(channel_type)
        assert excinfo.value.channel == channel_type
