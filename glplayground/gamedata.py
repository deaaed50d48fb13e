"""Shared game state: pressed inputs, play state and a restartable stopwatch."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable


class Input(Enum):
    """Logical controls a player can hold down."""

    RIGHT = 0
    LEFT = 1
    DOWN = 2
    UP = 3
    FIRE = 4


class State(Enum):
    """Overall state of a running game."""

    PLAYING = "playing"
    GAME_OVER = "game_over"
    WIN = "win"


@dataclass
class GameData:
    """The current play state and the set of controls held down."""

    state: State = State.PLAYING
    inputs: set[Input] = field(default_factory=set)

    def press(self, key: Input) -> None:
        """Mark a control as held down."""
        self.inputs.add(key)

    def release(self, key: Input) -> None:
        """Mark a control as no longer held down."""
        self.inputs.discard(key)

    def is_pressed(self, key: Input) -> bool:
        """Whether the control is currently held down."""
        return key in self.inputs

    def clear(self) -> None:
        """Release every control."""
        self.inputs.clear()


class Stopwatch:
    """Measures seconds elapsed since creation or the last restart."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._start = clock()

    def elapsed(self) -> float:
        """Seconds since the stopwatch was started or restarted."""
        return self._clock() - self._start

    def restart(self) -> float:
        """Restart the stopwatch and return the seconds that had elapsed."""
        now = self._clock()
        elapsed = now - self._start
        self._start = now
        return elapsed