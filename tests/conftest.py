"""Shared test fixtures for x32_remote tests."""

from __future__ import annotations

import socket
import threading
from typing import Any

import pytest
from pythonosc.osc_message import OscMessage
from pythonosc.osc_message_builder import OscMessageBuilder

from x32_remote.model.simulator import SimulatedConsoleSession


class FakeX32:
    """UDP responder that behaves like a console for one OSC address space.

    Messages with arguments are stored, messages without arguments are
    answered with the stored value (0 by default) to the sender's port.
    """

    def __init__(self) -> None:
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self.sock.bind(("127.0.0.1", 0))
        self.sock.settimeout(0.05)
        self.port: int = self.sock.getsockname()[1]
        self.values: dict[str, Any] = {}
        self.received: list[tuple[str, list[Any]]] = []
        self.silent = False
        self.empty_reply = False
        self.noise: list[bytes] = []
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()

    def _reply(self, address: str, *args: Any) -> bytes:
        builder = OscMessageBuilder(address=address)
        for arg in args:
            builder.add_arg(arg)
        return builder.build().dgram

    def _serve(self) -> None:
        while not self._stop.is_set():
            try:
                data, sender = self.sock.recvfrom(4096)
            except socket.timeout:
                continue
            except OSError:
                break
            message = OscMessage(data)
            params = list(message.params)
            self.received.append((message.address, params))
            if params:
                self.values[message.address] = params[0]
                continue
            if self.silent:
                continue
            for datagram in self.noise:
                self.sock.sendto(datagram, sender)
            if self.empty_reply:
                self.sock.sendto(self._reply(message.address), sender)
            else:
                value = self.values.get(message.address, 0)
                self.sock.sendto(self._reply(message.address, value), sender)

    def close(self) -> None:
        self._stop.set()
        self._thread.join(timeout=1.0)
        self.sock.close()


@pytest.fixture
def session() -> SimulatedConsoleSession:
    return SimulatedConsoleSession()


@pytest.fixture
def fake_x32():
    server = FakeX32()
    yield server
    server.close()
