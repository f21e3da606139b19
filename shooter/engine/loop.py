"""
Fixed-step driver between a host's frame callback and a ViewMachine
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from shooter.configs.game_config import WINDOW_CONFIG
from shooter.engine.events import Events
from shooter.engine.view import ActionKind, ViewMachine

log = logging.getLogger(__name__)


class FixedTicker:
    """
    Advances the machine by a constant simulated step per host frame.

    The host's measured frame time never reaches the simulation; it only
    decides how often step() is called.
    """

    def __init__(
        self,
        machine: ViewMachine,
        events: Events,
        tick_elapsed: float = WINDOW_CONFIG["tick_elapsed"],
        fps_log_interval: float = WINDOW_CONFIG["fps_log_interval"],
        clock: Callable[[], float] = time.monotonic,
    ):
        self.machine = machine
        self.events = events
        self.tick_elapsed = tick_elapsed
        self.fps_log_interval = fps_log_interval
        self.clock = clock

        self.ticks = 0
        self._last_report = clock()

    def step(self, delta_time: float) -> bool:
        """Run one tick; True once the host should close"""
        action = self.machine.update(self.tick_elapsed)
        self.events.begin_frame()

        self.ticks += 1
        now = self.clock()
        if now - self._last_report > self.fps_log_interval:
            log.debug("FPS: %d (host frame %.4fs)", self.ticks, delta_time)
            self.ticks = 0
            self._last_report = now

        return action.kind is ActionKind.QUIT
