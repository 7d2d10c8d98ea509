"""Translation of terminal key events into game inputs, plus text entry."""

from __future__ import annotations

import enum
import logging
import threading
from collections import deque
from dataclasses import dataclass

INPUT_BUFFER_SIZE = 16

_log = logging.getLogger(__name__)


class InputKind(enum.Enum):
    """A game-level input produced from a key event."""

    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    M = enum.auto()
    I = enum.auto()  # noqa: E741
    C = enum.auto()
    Y = enum.auto()
    BACKSPACE = enum.auto()
    ENTER = enum.auto()
    ESCAPE = enum.auto()
    QUIT = enum.auto()
    NO_INPUT = enum.auto()


class Key(enum.Enum):
    """Special (non-character) keys a terminal can report."""

    ARROW_UP = enum.auto()
    ARROW_DOWN = enum.auto()
    ARROW_LEFT = enum.auto()
    ARROW_RIGHT = enum.auto()
    BACKSPACE = enum.auto()
    BACKSPACE2 = enum.auto()
    ENTER = enum.auto()
    ESC = enum.auto()
    CTRL_C = enum.auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key press: either a special ``key`` or a printable character ``ch``."""

    key: Key | None = None
    ch: str = ""


_BACKSPACE_KEYS = frozenset({Key.BACKSPACE, Key.BACKSPACE2})

# Checked in order; the first matching rule decides the input.
_RULES: tuple[tuple[frozenset[Key], frozenset[str], InputKind], ...] = (
    (frozenset({Key.ARROW_UP}), frozenset("w"), InputKind.UP),
    (frozenset({Key.ARROW_DOWN}), frozenset("s"), InputKind.DOWN),
    (frozenset({Key.ARROW_LEFT}), frozenset("a"), InputKind.LEFT),
    (frozenset({Key.ARROW_RIGHT}), frozenset("d"), InputKind.RIGHT),
    (frozenset(), frozenset("m"), InputKind.M),
    (frozenset(), frozenset("i"), InputKind.I),
    (frozenset(), frozenset("c"), InputKind.C),
    (frozenset(), frozenset("yY"), InputKind.Y),
    (_BACKSPACE_KEYS, frozenset(), InputKind.BACKSPACE),
    (frozenset({Key.ENTER}), frozenset(), InputKind.ENTER),
    (frozenset({Key.ESC}), frozenset(), InputKind.ESCAPE),
    (frozenset({Key.CTRL_C}), frozenset(), InputKind.QUIT),
)


def translate_event(event: KeyEvent) -> InputKind:
    """Map a key event to the game input it stands for, or NO_INPUT."""
    for keys, chars, kind in _RULES:
        if event.key in keys or (event.ch and event.ch in chars):
            return kind
    return InputKind.NO_INPUT


class InputHandler:
    """Buffers translated inputs and, while active, collects typed text.

    The buffer holds at most ``capacity - 1`` inputs; when it is full the
    oldest input is dropped to make room for the new one.
    """

    def __init__(self, capacity: int = INPUT_BUFFER_SIZE) -> None:
        if capacity < 2:
            raise ValueError("capacity must be at least 2")
        self._capacity = capacity
        self._inputs: deque[InputKind] = deque()
        self._lock = threading.Lock()
        self._text: str | None = None
        self._text_max_length = 0

    def push_event(self, event: KeyEvent) -> InputKind:
        """Record a key event and return the input it was translated to."""
        kind = translate_event(event)
        with self._lock:
            if kind is not InputKind.NO_INPUT:
                if len(self._inputs) >= self._capacity - 1:
                    _log.info("Input buffer is full")
                    self._inputs.popleft()
                self._inputs.append(kind)
            if self._text is not None:
                self._populate_text(event)
        return kind

    def _populate_text(self, event: KeyEvent) -> None:
        assert self._text is not None
        if event.key in _BACKSPACE_KEYS and self._text:
            self._text = self._text[:-1]
        elif event.ch and len(self._text) < self._text_max_length - 1:
            self._text += event.ch

    def next_input(self) -> InputKind:
        """Remove and return the oldest buffered input, or NO_INPUT if none."""
        with self._lock:
            if not self._inputs:
                return InputKind.NO_INPUT
            return self._inputs.popleft()

    def start_text_input(self, max_length: int) -> None:
        """Begin collecting up to ``max_length - 1`` typed characters."""
        with self._lock:
            if self._text is not None:
                raise RuntimeError("text input is already active")
            if max_length <= 0:
                raise ValueError("max_length must be positive")
            self._text = ""
            self._text_max_length = max_length

    def end_text_input(self) -> None:
        """Stop collecting text and discard what was typed."""
        with self._lock:
            if self._text is None:
                raise RuntimeError("text input is not active")
            self._text = None
            self._text_max_length = 0

    def text(self) -> str:
        """Return the text typed since text input started."""
        with self._lock:
            if self._text is None:
                raise RuntimeError("text input is not active")
            return self._text