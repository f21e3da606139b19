"""
Per-tick input snapshot
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Set


class Key(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SPACE = "space"
    ESCAPE = "escape"
    ENTER = "enter"
    KEY_1 = "1"
    KEY_2 = "2"
    KEY_3 = "3"


class Events:
    """
    Key state as seen by one tick.

    `pressed` is the edge trigger (went down since the last tick) and `held`
    the level state. The host feeds key_down/key_up between ticks and calls
    begin_frame() once the tick has consumed the snapshot.
    """

    def __init__(self, held: Iterable[Key] = (), pressed: Iterable[Key] = (), quit_requested: bool = False):
        self._held: Set[Key] = set(held)
        self._pressed: Set[Key] = set(pressed)
        self.quit = quit_requested

    def held(self, key: Key) -> bool:
        return key in self._held

    def pressed(self, key: Key) -> bool:
        return key in self._pressed

    def key_down(self, key: Key):
        if key not in self._held:
            self._pressed.add(key)
        self._held.add(key)

    def key_up(self, key: Key):
        self._held.discard(key)

    def request_quit(self):
        self.quit = True

    def begin_frame(self):
        """Forget edge triggers; held keys and a pending quit persist"""
        self._pressed.clear()

    def __repr__(self):
        held = sorted(k.value for k in self._held)
        pressed = sorted(k.value for k in self._pressed)
        return f"Events(held={held}, pressed={pressed}, quit={self.quit})"
