"""
X32 OSC session over UDP.
Sends commands with python-osc and waits for replies on the same socket,
since the console answers to the port a request came from.
"""
import threading
import time
from typing import Any, Optional, Sequence

from pythonosc import udp_client
from pythonosc.osc_message import OscMessage, ParseError
from pythonosc.osc_message_builder import BuildError, OscMessageBuilder

from x32_remote.config.settings import DEFAULT_X32_HOST, DEFAULT_X32_PORT, REPLY_TIMEOUT_SEC
from x32_remote.model.command import Scalar
from x32_remote.model.errors import SessionError, UnexpectedReplyType
from x32_remote.utils.logger import get_logger


class X32OSCSession:
    """
    Session that talks OSC to an X32 console.
    Thread-safe: one request/reply exchange runs at a time, while casts only
    wait for the send of another thread to finish.
    """

    def __init__(self, host: str = DEFAULT_X32_HOST, port: int = DEFAULT_X32_PORT,
                 timeout: float = REPLY_TIMEOUT_SEC):
        self.logger = get_logger(__name__)
        self.host = host
        self.port = port
        self.timeout = timeout

        self.client: Optional[udp_client.SimpleUDPClient] = None
        self._lock = threading.RLock()         # client handle and sends
        self._reply_lock = threading.Lock()    # one call waiting for a reply

    def set_connection_params(self, host: str, port: int) -> None:
        """Set console address. Takes effect on the next open()."""
        self.host = host
        self.port = port
        self.logger.info(f"X32 address set: {host}:{port}")

    def open(self) -> "X32OSCSession":
        """Create the UDP client. Does nothing if the session is already open."""
        with self._lock:
            if self.client is None:
                try:
                    self.client = udp_client.SimpleUDPClient(self.host, self.port)
                except OSError as e:
                    raise SessionError(f"Cannot open OSC client for {self.host}:{self.port}: {e}") from e
                self.logger.info(f"OSC session opened: {self.host}:{self.port}")
            return self

    def close(self) -> None:
        """Drop the UDP client. Later commands raise SessionError until open()."""
        with self._lock:
            if self.client is not None:
                self.client = None
                self.logger.info("OSC session closed")

    def is_open(self) -> bool:
        """Check if the session has a client."""
        return self.client is not None

    def __enter__(self) -> "X32OSCSession":
        return self.open()

    def __exit__(self, *_exc_info: object) -> None:
        self.close()

    def _send(self, address: str, args: Sequence[Scalar]) -> udp_client.SimpleUDPClient:
        """Send one message and return the client it went out on."""
        with self._lock:
            client = self.client
            if client is None:
                raise SessionError("OSC session is not open")

            try:
                builder = OscMessageBuilder(address=address)
                for arg in args:
                    builder.add_arg(arg)
                client.send(builder.build())
            except (BuildError, ValueError) as e:
                raise SessionError(f"Cannot encode OSC message {address}: {e}") from e
            except OSError as e:
                raise SessionError(f"OSC send failed for {address}: {e}") from e
            self.logger.debug(f"-> {address} {list(args)}")
            return client

    @staticmethod
    def _parse(data: bytes) -> Optional[OscMessage]:
        if not OscMessage.dgram_is_message(data):
            return None
        try:
            return OscMessage(data)
        except ParseError:
            return None

    def cast(self, address: str, args: Sequence[Scalar] = ()) -> bool:
        """Send a message without waiting for any reply."""
        self._send(address, args)
        return True

    def call(self, address: str, args: Sequence[Scalar] = ()) -> Any:
        """Send a message and return the first argument of the matching reply."""
        with self._reply_lock:
            client = self._send(address, args)
            deadline = time.monotonic() + self.timeout

            while True:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise SessionError(f"No reply from X32 for {address} within {self.timeout}s")

                try:
                    data = client.receive(remaining)
                except OSError as e:
                    raise SessionError(f"OSC receive failed for {address}: {e}") from e
                if not data:
                    continue

                reply = self._parse(data)
                if reply is None:
                    self.logger.warning(f"Ignoring malformed datagram while waiting for {address}")
                    continue

                # Late replies to earlier requests are skipped
                if reply.address != address:
                    self.logger.debug(f"Skipping reply for {reply.address}")
                    continue

                self.logger.debug(f"<- {reply.address} {reply.params}")
                if not reply.params:
                    raise UnexpectedReplyType(reply.params, "reply argument")
                return reply.params[0]
