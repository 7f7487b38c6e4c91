"""Keyboard state tracking and debounced toggle keys."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Hashable, Optional, Set

_TOGGLE_DELAY = 0.2


@dataclass(frozen=True)
class KeyEvent:
    """A key going down (``pressed``) or up."""

    key: Hashable
    pressed: bool


class Keyboard:
    """Keys currently held, fed from key events."""

    def __init__(self) -> None:
        self._down: Set[Hashable] = set()
        self._recent: Optional[Hashable] = None

    def update(self, event: Optional[KeyEvent]) -> None:
        """Apply an event; ``None`` stands for any non-key event."""
        self._recent = None
        if event is None:
            return
        if event.pressed:
            self._recent = event.key
            self._down.add(event.key)
        else:
            self._down.discard(event.key)

    def is_key_down(self, key: Hashable) -> bool:
        return key in self._down

    def key_released(self, key: Hashable) -> bool:
        """True if the last event was a press of ``key``."""
        return self._recent == key


class ToggleKey:
    """Reports a held key at most once per delay period."""

    def __init__(
        self,
        key: Hashable,
        is_pressed: Callable[[Hashable], bool],
        clock: Callable[[], float] = time.monotonic,
        delay: float = _TOGGLE_DELAY,
    ):
        self.key = key
        self._is_pressed = is_pressed
        self._clock = clock
        self._delay = delay
        self._last = clock()

    def is_key_pressed(self) -> bool:
        if self._clock() - self._last > self._delay and self._is_pressed(self.key):
            self._last = self._clock()
            return True
        return False