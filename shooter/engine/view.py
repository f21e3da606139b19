"""
Views and the state machine that switches between them
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from shooter.engine.events import Events
from shooter.engine.gfx import ImageLoader, Renderer, TextRenderer

log = logging.getLogger(__name__)


@dataclass
class Context:
    """Everything a view may touch during a tick"""
    events: Events
    renderer: Renderer
    loader: ImageLoader
    text: TextRenderer

    def output_size(self) -> Tuple[float, float]:
        w, h = self.renderer.output_size()
        return float(w), float(h)


ViewFactory = Callable[[Context], "View"]


class ActionKind(Enum):
    NONE = "none"
    QUIT = "quit"
    CHANGE_VIEW = "change_view"


@dataclass(frozen=True)
class ViewAction:
    """What the active view asks the machine to do after a tick"""
    kind: ActionKind
    factory: Optional[ViewFactory] = None

    @classmethod
    def none(cls) -> "ViewAction":
        return cls(ActionKind.NONE)

    @classmethod
    def quit(cls) -> "ViewAction":
        return cls(ActionKind.QUIT)

    @classmethod
    def change(cls, factory: ViewFactory) -> "ViewAction":
        return cls(ActionKind.CHANGE_VIEW, factory)


class View(ABC):
    """A top-level mode: advance on update, draw on render"""

    @abstractmethod
    def update(self, ctx: Context, elapsed: float) -> ViewAction:
        """Advance one tick and say what the machine should do next"""

    @abstractmethod
    def render(self, renderer: Renderer):
        """Draw the current state, clearing the frame first"""


class ViewMachine:
    """Owns the active view and applies the transitions it returns"""

    def __init__(self, ctx: Context, initial: ViewFactory):
        self.ctx = ctx
        self.view: View = initial(ctx)
        self.terminated = False

    def update(self, elapsed: float) -> ViewAction:
        if self.terminated:
            return ViewAction.quit()

        action = self.view.update(self.ctx, elapsed)

        if action.kind is ActionKind.QUIT:
            log.info("Quit requested from %s", type(self.view).__name__)
            self.terminated = True
        elif action.kind is ActionKind.CHANGE_VIEW:
            self.view = action.factory(self.ctx)
            log.info("Switched to %s", type(self.view).__name__)

        return action

    def render(self):
        if not self.terminated:
            self.view.render(self.ctx.renderer)

    def tick(self, elapsed: float) -> ViewAction:
        """One update followed, when the view stays active, by one render"""
        action = self.update(elapsed)
        if action.kind is ActionKind.NONE:
            self.render()
        return action
