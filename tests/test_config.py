"""Tests for x32_remote.config and x32_remote.utils.logger."""

from __future__ import annotations

from x32_remote.config import channel_config, settings
from x32_remote.utils.logger import get_logger


class TestSettings:
    def test_defaults_are_valid(self) -> None:
        assert settings.validate_config()

    def test_get_config(self) -> None:
        config = settings.get_config()
        assert config["device"]["mono_level_max"] == 160
        assert config["network"]["x32_port"] == settings.DEFAULT_X32_PORT

    def test_invalid_port(self, monkeypatch) -> None:
        monkeypatch.setattr(settings, "DEFAULT_X32_PORT", 70000)
        assert not settings.validate_config()

    def test_invalid_log_level(self, monkeypatch) -> None:
        monkeypatch.setattr(settings, "LOG_LEVEL", "LOUD")
        assert not settings.validate_config()


class TestChannelConfig:
    def test_types(self) -> None:
        assert channel_config.get_channel_types() == ["ch", "auxin", "fxrtn", "bus", "mtx"]

    def test_range(self) -> None:
        assert channel_config.get_channel_range("bus") == (1, 16)

    def test_supported(self) -> None:
        assert channel_config.is_channel_type_supported("fxrtn")
        assert not channel_config.is_channel_type_supported("dca")


class TestLogger:
    def test_sink_receives_messages(self) -> None:
        logger = get_logger("x32_remote.tests.sink")
        received: list[str] = []
        logger.set_sink(received.append)
        logger.info("hello")
        logger.warning("careful")
        assert received == ["hello", "careful"]

    def test_no_duplicate_handlers(self) -> None:
        first = get_logger("x32_remote.tests.handlers")
        get_logger("x32_remote.tests.handlers")
        assert len(first._logger.handlers) == 1
