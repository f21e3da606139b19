"""
Arcade host for the shooter core
--------------------------------
- ArcadeRenderer: draw requests in top-left world coordinates -> arcade
- ArcadeImageLoader: textures from an asset root
- ArcadeTextRenderer: label sprites, fonts cached by (path, size)
- ShooterWindow: keyboard bookkeeping and the fixed-tick loop

Arcade's y axis points up; the core's points down, so every destination
rectangle is flipped here and nowhere else.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Tuple

import arcade

from shooter.configs.game_config import WINDOW_CONFIG
from shooter.engine.events import Events, Key
from shooter.engine.geometry import Rectangle
from shooter.engine.gfx import Color, RegionCache, Sprite
from shooter.engine.loop import FixedTicker
from shooter.engine.view import Context, ViewFactory, ViewMachine
from shooter.errors import AssetLoadError

log = logging.getLogger(__name__)

KEY_MAP = {
    arcade.key.UP: Key.UP,
    arcade.key.DOWN: Key.DOWN,
    arcade.key.LEFT: Key.LEFT,
    arcade.key.RIGHT: Key.RIGHT,
    arcade.key.SPACE: Key.SPACE,
    arcade.key.ESCAPE: Key.ESCAPE,
    arcade.key.ENTER: Key.ENTER,
    arcade.key.KEY_1: Key.KEY_1,
    arcade.key.KEY_2: Key.KEY_2,
    arcade.key.KEY_3: Key.KEY_3,
}


class ArcadeImageLoader:
    """Loads textures relative to an asset root"""

    def __init__(self, root: str = "."):
        self.root = root

    def resolve(self, path: str) -> str:
        return path if os.path.isabs(path) else os.path.join(self.root, path)

    def load_image(self, path: str) -> arcade.Texture:
        full_path = self.resolve(path)
        try:
            texture = arcade.load_texture(full_path)
        except (FileNotFoundError, OSError) as err:
            raise AssetLoadError(full_path, str(err)) from err
        log.debug("Loaded %s (%dx%d)", full_path, texture.width, texture.height)
        return texture


class ArcadeTextRenderer:
    """Turns labels into sprites; font handles are cached by (path, size)"""

    def __init__(self, loader: ArcadeImageLoader):
        self.loader = loader
        self._fonts: Dict[Tuple[str, int], str] = {}

    def _font(self, font_path: str, size: int) -> str:
        key = (font_path, size)
        if key not in self._fonts:
            full_path = self.loader.resolve(font_path)
            try:
                arcade.load_font(full_path)
            except (FileNotFoundError, OSError) as err:
                raise AssetLoadError(full_path, str(err)) from err
            self._fonts[key] = full_path
        return self._fonts[key]

    def render_text(self, text: str, font_path: str, size: int, color: Color) -> Sprite:
        text_sprite = arcade.create_text_sprite(
            text,
            color=color,
            font_size=size,
            font_name=self._font(font_path, size),
        )
        return Sprite.new(text_sprite.texture)


def crop_region(texture: arcade.Texture, src: Rectangle) -> arcade.Texture:
    return texture.crop(int(src.x), int(src.y), int(src.w), int(src.h))


class ArcadeRenderer:
    """Immediate-mode drawing into the window, valid only inside on_draw"""

    def __init__(self, window: arcade.Window):
        self.window = window
        self._regions: RegionCache[arcade.Texture] = RegionCache(crop_region)

    def output_size(self) -> Tuple[float, float]:
        w, h = self.window.get_size()
        return float(w), float(h)

    def _flip(self, rect: Rectangle) -> Rectangle:
        _, win_h = self.output_size()
        return rect.flip_y(win_h)

    def clear(self, color: Color):
        self.window.clear(color=color)

    def draw(self, sprite: Sprite, dest: Rectangle):
        flipped = self._flip(dest)
        arcade.draw_texture_rect(
            self._regions.get(sprite),
            arcade.LBWH(flipped.x, flipped.y, flipped.w, flipped.h),
        )

    def fill_rect(self, rect: Rectangle, color: Color):
        flipped = self._flip(rect)
        arcade.draw_lrbt_rectangle_filled(flipped.x, flipped.right, flipped.y, flipped.y + flipped.h, color)


class ShooterWindow(arcade.Window):
    """Arcade window driving a ViewMachine at a fixed tick"""

    def __init__(
        self,
        initial: ViewFactory,
        assets_root: str = ".",
        title: str = WINDOW_CONFIG["title"],
        width: int = WINDOW_CONFIG["width"],
        height: int = WINDOW_CONFIG["height"],
        tick_interval: float = WINDOW_CONFIG["tick_interval"],
        tick_elapsed: float = WINDOW_CONFIG["tick_elapsed"],
        fps_log_interval: float = WINDOW_CONFIG["fps_log_interval"],
    ):
        super().__init__(width, height, title, update_rate=tick_interval)

        self.events = Events()
        loader = ArcadeImageLoader(assets_root)
        self.ctx = Context(
            events=self.events,
            renderer=ArcadeRenderer(self),
            loader=loader,
            text=ArcadeTextRenderer(loader),
        )
        self.machine = ViewMachine(self.ctx, initial)
        self.ticker = FixedTicker(
            self.machine,
            self.events,
            tick_elapsed=tick_elapsed,
            fps_log_interval=fps_log_interval,
        )

    def on_key_press(self, symbol: int, modifiers: int):
        key = KEY_MAP.get(symbol)
        if key is not None:
            self.events.key_down(key)

    def on_key_release(self, symbol: int, modifiers: int):
        key = KEY_MAP.get(symbol)
        if key is not None:
            self.events.key_up(key)

    def on_close(self):
        # Handled at the start of the next tick
        self.events.request_quit()

    def on_update(self, delta_time: float):
        if self.ticker.step(delta_time):
            self.close()

    def on_draw(self):
        # Every view clears with its own color first
        self.machine.render()


def run(initial: ViewFactory, **window_config):
    """Open the window and block until the game quits"""
    window = ShooterWindow(initial, **window_config)
    log.info("Window opened at %dx%d", window.width, window.height)
    arcade.run()
