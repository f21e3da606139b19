"""
Projectiles fired by the player's two cannons

Each cannon type fires a pair of bullets; every bullet kind advances along
its own law and expires once it leaves the play field.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from shooter.configs.game_config import BULLET_CONFIG, CANNON_CONFIG
from shooter.engine.geometry import Rectangle
from shooter.engine.gfx import Renderer

BULLET_SPEED = BULLET_CONFIG["speed"]
BULLET_W = BULLET_CONFIG["width"]
BULLET_H = BULLET_CONFIG["height"]
BULLET_COLOR = BULLET_CONFIG["color"]


# ----------------------------
# Cannon types
# ----------------------------

@dataclass(frozen=True)
class RectCannon:
    """Straight shots"""


@dataclass(frozen=True)
class SineCannon:
    amplitude: float = CANNON_CONFIG["sine_amplitude"]
    angular_vel: float = CANNON_CONFIG["sine_angular_vel"]


@dataclass(frozen=True)
class DivergentCannon:
    a: float = CANNON_CONFIG["divergent_a"]
    b: float = CANNON_CONFIG["divergent_b"]


CannonType = Union[RectCannon, SineCannon, DivergentCannon]


# ----------------------------
# Bullets
# ----------------------------

@dataclass
class RectBullet:
    """Flies right in a straight line"""
    bounds: Rectangle

    def update(self, output_size: Tuple[float, float], dt: float) -> Optional["RectBullet"]:
        self.bounds = self.bounds.translate(BULLET_SPEED * dt, 0.0)
        w, _ = output_size
        if self.bounds.x > w:
            return None
        return self

    def rect(self) -> Rectangle:
        return self.bounds

    def render(self, renderer: Renderer):
        renderer.fill_rect(self.rect(), BULLET_COLOR)


@dataclass
class SineBullet:
    """Flies right while oscillating around its firing height"""
    pos_x: float
    origin_y: float
    amplitude: float
    angular_vel: float
    total_time: float = 0.0

    def update(self, output_size: Tuple[float, float], dt: float) -> Optional["SineBullet"]:
        self.total_time += dt
        self.pos_x += BULLET_SPEED * dt
        w, _ = output_size
        if self.rect().x > w:
            return None
        return self

    def rect(self) -> Rectangle:
        dy = self.amplitude * math.sin(self.angular_vel * self.total_time)
        return Rectangle(self.pos_x, self.origin_y + dy, BULLET_W, BULLET_H)

    def render(self, renderer: Renderer):
        renderer.fill_rect(self.rect(), BULLET_COLOR)


@dataclass
class DivergentBullet:
    """Flies right while bending away along a cubic curve"""
    pos_x: float
    origin_y: float
    a: float
    b: float
    total_time: float = 0.0

    def update(self, output_size: Tuple[float, float], dt: float) -> Optional["DivergentBullet"]:
        self.total_time += dt
        self.pos_x += BULLET_SPEED * dt
        w, h = output_size
        rect = self.rect()
        if rect.x > w or rect.x < 0.0 or rect.y > h or rect.y < 0.0:
            return None
        return self

    def rect(self) -> Rectangle:
        t = self.total_time / self.b
        dy = self.a * (t ** 3 - t ** 2)
        return Rectangle(self.pos_x, self.origin_y + dy, BULLET_W, BULLET_H)

    def render(self, renderer: Renderer):
        renderer.fill_rect(self.rect(), BULLET_COLOR)


Bullet = Union[RectBullet, SineBullet, DivergentBullet]


def spawn_bullets(cannon: CannonType, cannons_x: float, cannon1_y: float, cannon2_y: float) -> List[Bullet]:
    """Two bullets, one per cannon, shaped by the cannon type"""
    if isinstance(cannon, RectCannon):
        return [
            RectBullet(Rectangle(cannons_x, cannon1_y, BULLET_W, BULLET_H)),
            RectBullet(Rectangle(cannons_x, cannon2_y, BULLET_W, BULLET_H)),
        ]

    if isinstance(cannon, SineCannon):
        return [
            SineBullet(cannons_x, cannon1_y, cannon.amplitude, cannon.angular_vel),
            SineBullet(cannons_x, cannon2_y, cannon.amplitude, cannon.angular_vel),
        ]

    if isinstance(cannon, DivergentCannon):
        # Mirrored curves
        return [
            DivergentBullet(cannons_x, cannon1_y, -cannon.a, cannon.b),
            DivergentBullet(cannons_x, cannon2_y, cannon.a, cannon.b),
        ]

    raise TypeError(f"Unknown cannon type: {cannon!r}")
