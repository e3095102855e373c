"""Terminal drawing and keyboard input."""

from __future__ import annotations

import getpass
import sys
from contextlib import ExitStack
from typing import TextIO

from .game import AppState, GameStatus, Key, KeyPress

TITLE = "Type Racer TUI"

_MESSAGE_COLOR = {
    GameStatus.NOT_STARTED: "blue",
    GameStatus.IN_PROGRESS: "red",
    GameStatus.FINISHED: "normal",
    GameStatus.EXITING: "blue",
}

_SEQUENCE_KEYS = {
    "KEY_BACKSPACE": Key.BACKSPACE,
    "KEY_ESCAPE": Key.ESC,
    "KEY_ENTER": Key.ENTER,
    "KEY_TAB": Key.TAB,
    "KEY_DELETE": Key.DELETE,
    "KEY_LEFT": Key.LEFT,
    "KEY_RIGHT": Key.RIGHT,
    "KEY_UP": Key.UP,
    "KEY_DOWN": Key.DOWN,
}

_CONTROL_CHARS = {
    "\x1b": Key.ESC,
    "\x7f": Key.BACKSPACE,
    "\x08": Key.BACKSPACE,
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    "\t": Key.TAB,
}


def _message(status: GameStatus, user: str | None) -> str:
    if status in (GameStatus.NOT_STARTED, GameStatus.EXITING):
        name = user if user is not None else getpass.getuser()
        return f"Hello {name}! Press 'ESC' to quit."
    if status is GameStatus.IN_PROGRESS:
        return "Testing your typing speed..."
    return ""


def frame_lines(
    app_state: AppState, width: int, height: int, user: str | None = None
) -> list[str]:
    """Plain-text rows of a ``width`` x ``height`` frame for the current state."""
    if width < 2 or height < 2:
        raise ValueError(f"frame of {width}x{height} is too small to draw")

    inner = width - 2
    title = TITLE[:inner]
    top = "┌" + title + "─" * (inner - len(title)) + "┐"
    bottom = "└" + "─" * inner + "┘"

    body = [" " * inner for _ in range(height - 2)]
    text = _message(app_state.status, user)[:inner]
    if text and body:
        left = (inner - len(text)) // 2
        body[0] = " " * left + text + " " * (inner - left - len(text))

    return [top, *(f"│{row}│" for row in body), bottom]


class TerminalSession:
    """Full-screen terminal session; use as a context manager."""

    def __init__(self, term=None, stream: TextIO | None = None, user: str | None = None):
        if term is None:
            import blessed

            term = blessed.Terminal()
        self._term = term
        self._stream = stream if stream is not None else sys.stdout
        self._user = user
        self._stack: ExitStack | None = None

    def __enter__(self) -> "TerminalSession":
        stack = ExitStack()
        try:
            stack.enter_context(self._term.fullscreen())
            stack.enter_context(self._term.cbreak())
            stack.enter_context(self._term.hidden_cursor())
        except BaseException:
            stack.close()
            raise
        self._stack = stack
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()

    def draw(self, app_state: AppState) -> None:
        """Redraw the whole screen for ``app_state``."""
        term = self._term
        try:
            lines = frame_lines(app_state, term.width, term.height, self._user)
        except ValueError:
            return
        color = getattr(term, _MESSAGE_COLOR[app_state.status])
        border = term.green
        last = len(lines) - 1
        parts = [term.home, term.clear]
        for row, line in enumerate(lines):
            parts.append(term.move_yx(row, 0))
            if row in (0, last):
                parts.append(border(line))
            else:
                parts.append(border(line[0]) + color(line[1:-1]) + border(line[-1]))
        self._stream.write("".join(parts))
        self._stream.flush()

    def read_key(self, timeout: float | None = None) -> KeyPress | None:
        """Wait up to ``timeout`` seconds for a key; ``None`` if none arrived."""
        keystroke = self._term.inkey(timeout=timeout)
        if not keystroke:
            return None
        if keystroke.is_sequence:
            return _SEQUENCE_KEYS.get(keystroke.name, Key.OTHER)
        char = str(keystroke)
        if char in _CONTROL_CHARS:
            return _CONTROL_CHARS[char]
        if len(char) != 1 or not char.isprintable():
            return Key.OTHER
        return char

    def cleanup(self) -> None:
        """Leave the full screen, restore the cursor and input mode."""
        stack, self._stack = self._stack, None
        if stack is not None:
            stack.close()