"""Game state for a typing race: keystroke handling, timing and scoring."""

from __future__ import annotations

import enum
import logging
import math
import time
from dataclasses import dataclass, field
from typing import Callable, Union

logger = logging.getLogger(__name__)

CHARS_PER_WORD = 5


class GameStatus(enum.Enum):
    """Phase of a typing race."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"
    EXITING = "exiting"


class Key(enum.Enum):
    """Non-character keys the game can receive."""

    BACKSPACE = "backspace"
    ESC = "esc"
    ENTER = "enter"
    TAB = "tab"
    DELETE = "delete"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    OTHER = "other"


KeyPress = Union[str, Key]


@dataclass
class AppState:
    """Progress of one race against ``target_text``.

    A keypress is either a one-character string or a :class:`Key` member.
    """

    target_text: str
    typed_chars: list[str] = field(default_factory=list)
    current_index: int = 0
    status: GameStatus = GameStatus.NOT_STARTED
    start_time: float | None = None
    end_time: float | None = None
    mistakes: int = 0
    clock: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)

    def __post_init__(self) -> None:
        logger.debug("Creating new AppState.")

    def handle_keypress(self, key: KeyPress) -> None:
        """Apply one keypress to the race."""
        if self.status is GameStatus.FINISHED:
            logger.debug("Keypress ignored: game already finished.")
            return

        if isinstance(key, str):
            if len(key) != 1:
                raise ValueError(f"expected a single character, got {key!r}")
            self._type_char(key)
        elif key is Key.BACKSPACE:
            self._backspace()
        elif key is Key.ESC:
            self.cancel()
        else:
            logger.debug("Unhandled key press: %s", key)

    def _type_char(self, char: str) -> None:
        if self.status is GameStatus.NOT_STARTED:
            self.status = GameStatus.IN_PROGRESS
            self.start_time = self.clock()
            logger.debug("Game status -> InProgress, timer started.")

        if self.status is not GameStatus.IN_PROGRESS:
            return

        total = len(self.target_text)
        if self.current_index >= total:
            logger.debug("Input %r ignored: end of target text reached.", char)
            return

        if char != self.target_text[self.current_index]:
            self.mistakes += 1
            logger.debug("Mistake registered. Total: %d", self.mistakes)

        self.typed_chars.append(char)
        self.current_index += 1
        logger.debug("Character %r processed. Index: %d", char, self.current_index)

        if self.current_index == total:
            self.status = GameStatus.FINISHED
            self.end_time = self.clock()
            logger.info("Game status -> Finished.")

    def _backspace(self) -> None:
        if self.status is GameStatus.IN_PROGRESS and self.current_index > 0:
            self.current_index -= 1
            self.typed_chars.pop()
            logger.debug("Backspace processed. Index: %d", self.current_index)
        else:
            logger.debug("Backspace ignored: nothing to delete or game not in progress.")

    def calculate_wpm(self) -> int:
        """Words per minute over the whole target, five characters to a word."""
        if self.start_time is None or self.end_time is None:
            return 0
        minutes = (self.end_time - self.start_time) / 60.0
        num_chars = len(self.target_text)
        if minutes > 0.0 and num_chars > 0:
            return math.floor(num_chars / CHARS_PER_WORD / minutes + 0.5)
        return 0

    def calculate_accuracy(self) -> float:
        """Percentage of typed characters that were not mistakes."""
        if self.current_index == 0:
            return 100.0
        correct = max(self.current_index - self.mistakes, 0)
        accuracy = correct / self.current_index * 100.0
        return min(max(accuracy, 0.0), 100.0)

    def reset(self) -> None:
        """Return to the state before the first keypress."""
        self.typed_chars.clear()
        self.current_index = 0
        self.status = GameStatus.NOT_STARTED
        self.start_time = None
        self.end_time = None
        self.mistakes = 0
        logger.info("Game state reset.")

    def cancel(self) -> None:
        """Abandon the race."""
        self.status = GameStatus.EXITING
        self.end_time = self.clock()
        logger.info("Game exiting. Total mistakes: %d", self.mistakes)