"""
Main menu with a cycling selection over its actions
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List

from shooter.configs.game_config import BACKGROUND_CONFIG, GAME_CONFIG, MENU_CONFIG
from shooter.engine.events import Key
from shooter.engine.geometry import Rectangle
from shooter.engine.gfx import Renderer, Sprite
from shooter.engine.view import Context, View, ViewAction
from shooter.game.background import Background

log = logging.getLogger(__name__)


@dataclass
class MenuAction:
    """A menu entry: what it does and how it looks idle / focused"""
    label: str
    func: Callable[[Context], ViewAction]
    idle_sprite: Sprite
    hover_sprite: Sprite

    @classmethod
    def new(cls, ctx: Context, label: str, func: Callable[[Context], ViewAction]) -> "MenuAction":
        font = MENU_CONFIG["font_path"]
        return cls(
            label=label,
            func=func,
            idle_sprite=ctx.text.render_text(label, font, MENU_CONFIG["idle_size"], MENU_CONFIG["idle_color"]),
            hover_sprite=ctx.text.render_text(label, font, MENU_CONFIG["hover_size"], MENU_CONFIG["hover_color"]),
        )


def _new_game(ctx: Context) -> ViewAction:
    from shooter.game.game_view import GameView
    return ViewAction.change(GameView)


def _quit(ctx: Context) -> ViewAction:
    return ViewAction.quit()


class MainMenuView(View):
    def __init__(self, ctx: Context):
        self.actions: List[MenuAction] = [
            MenuAction.new(ctx, "New Game", _new_game),
            MenuAction.new(ctx, "Quit", _quit),
        ]
        self.selected = 0

        self.bg_back = Background.load(ctx.loader, **BACKGROUND_CONFIG["back"])
        self.bg_middle = Background.load(ctx.loader, **BACKGROUND_CONFIG["middle"])
        self.bg_front = Background.load(ctx.loader, **BACKGROUND_CONFIG["front"])

    def update(self, ctx: Context, elapsed: float) -> ViewAction:
        events = ctx.events

        if events.quit or events.pressed(Key.ESCAPE):
            return ViewAction.quit()

        if events.pressed(Key.SPACE) or events.pressed(Key.ENTER):
            action = self.actions[self.selected]
            log.info("Menu action selected: %s", action.label)
            return action.func(ctx)

        if events.pressed(Key.UP):
            self.selected = (self.selected - 1) % len(self.actions)

        if events.pressed(Key.DOWN):
            self.selected = (self.selected + 1) % len(self.actions)

        for bg in (self.bg_back, self.bg_middle, self.bg_front):
            bg.advance(elapsed)

        return ViewAction.none()

    def render(self, renderer: Renderer):
        renderer.clear(GAME_CONFIG["clear_color"])

        self.bg_back.render(renderer)
        self.bg_middle.render(renderer)
        self.bg_front.render(renderer)

        win_w, win_h = renderer.output_size()
        label_h = MENU_CONFIG["label_h"]
        border_width = MENU_CONFIG["border_width"]
        box_w = MENU_CONFIG["box_w"]
        box_h = len(self.actions) * label_h
        margin_h = MENU_CONFIG["margin_h"]

        renderer.fill_rect(Rectangle(
            x=(win_w - box_w) / 2.0 - border_width,
            y=(win_h - box_h) / 2.0 - margin_h - border_width,
            w=box_w + border_width * 2.0,
            h=box_h + border_width * 2.0 + margin_h * 2.0,
        ), MENU_CONFIG["border_color"])

        renderer.fill_rect(Rectangle(
            x=(win_w - box_w) / 2.0,
            y=(win_h - box_h) / 2.0 - margin_h,
            w=box_w,
            h=box_h + margin_h * 2.0,
        ), MENU_CONFIG["box_color"])

        for i, action in enumerate(self.actions):
            sprite = action.hover_sprite if i == self.selected else action.idle_sprite
            w, h = sprite.size()
            sprite.render(renderer, Rectangle(
                x=(win_w - w) / 2.0,
                y=(win_h - box_h + label_h - h) / 2.0 + label_h * i,
                w=w,
                h=h,
            ))
