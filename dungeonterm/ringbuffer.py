"""A bounded, thread-safe message buffer shared by log producers and a writer."""

from __future__ import annotations

import threading
from collections import deque

BUFFER_SIZE = 40
MAX_HEADER_SIZE = 128
MAX_MSG_SIZE = 256 + MAX_HEADER_SIZE


class RingBuffer:
    """A fixed-capacity FIFO of strings.

    Writes to a full buffer are dropped. Messages longer than
    ``max_message_size - 1`` characters are cut to that length.
    """

    def __init__(self, capacity: int = BUFFER_SIZE, max_message_size: int = MAX_MSG_SIZE) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        if max_message_size <= 0:
            raise ValueError("max_message_size must be positive")
        self._capacity = capacity
        self._max_message_size = max_message_size
        self._messages: deque[str] = deque()
        self._cond = threading.Condition()

    @property
    def capacity(self) -> int:
        return self._capacity

    def write(self, message: str) -> bool:
        """Append a message; return False if it was dropped because the buffer is full."""
        if message is None:
            raise TypeError("message must be a string")
        with self._cond:
            if len(self._messages) >= self._capacity:
                return False
            self._messages.append(message[: self._max_message_size - 1])
            self._cond.notify()
            return True

    def read(self, timeout: float | None = None) -> str:
        """Remove and return the oldest message, waiting for one if needed.

        Raises TimeoutError if no message arrives within ``timeout`` seconds.
        """
        with self._cond:
            if not self._cond.wait_for(lambda: self._messages, timeout=timeout):
                raise TimeoutError("no message available")
            return self._messages.popleft()

    def __len__(self) -> int:
        with self._cond:
            return len(self._messages)