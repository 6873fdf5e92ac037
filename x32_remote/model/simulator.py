"""
In-memory console session for offline use and tests.
"""
import threading
from typing import Any, Dict, List, Optional, Sequence, Tuple

from x32_remote.model.command import Scalar
from x32_remote.utils.logger import get_logger


class SimulatedConsoleSession:
    """
    Session that keeps one value per OSC address.

    ``cast`` stores its argument, ``call`` returns the stored value (0 for
    addresses never set). Every message is appended to ``sent``.
    """

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self.logger = get_logger(__name__)
        self.values: Dict[str, Any] = dict(initial or {})
        self.sent: List[Tuple[str, str, Tuple[Scalar, ...]]] = []
        self._lock = threading.RLock()

    def call(self, address: str, args: Sequence[Scalar] = ()) -> Any:
        with self._lock:
            self.sent.append(("call", address, tuple(args)))
            return self.values.get(address, 0)

    def cast(self, address: str, args: Sequence[Scalar] = ()) -> bool:
        with self._lock:
            self.sent.append(("cast", address, tuple(args)))
            if args:
                self.values[address] = args[0]
            self.logger.debug(f"[sim] {address} = {list(args)}")
            return True

    @property
    def last_message(self) -> Tuple[str, str, Tuple[Scalar, ...]]:
        return self.sent[-1]
