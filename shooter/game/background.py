"""
Scrolling parallax layer
"""

from __future__ import annotations

from dataclasses import dataclass

from shooter.engine.geometry import Rectangle
from shooter.engine.gfx import ImageLoader, Renderer, Sprite


@dataclass
class Background:
    """Image tiled horizontally and scrolled leftward at `vel` px/s"""
    sprite: Sprite
    vel: float
    pos: float = 0.0

    @classmethod
    def load(cls, loader: ImageLoader, path: str, vel: float) -> "Background":
        return cls(Sprite.load(loader, path), vel)

    def advance(self, elapsed: float):
        w, _ = self.sprite.size()
        self.pos += self.vel * elapsed
        if w > 0 and self.pos > w:
            self.pos %= w

    def render(self, renderer: Renderer):
        """Scale the image to the window height and repeat it across the width"""
        size_w, size_h = self.sprite.size()
        if size_w <= 0 or size_h <= 0:
            return

        win_w, win_h = renderer.output_size()
        scale = win_h / size_h
        tile_w = size_w * scale

        physical_left = -self.pos * scale
        while physical_left < win_w:
            self.sprite.render(renderer, Rectangle(physical_left, 0.0, tile_w, float(win_h)))
            physical_left += tile_w
