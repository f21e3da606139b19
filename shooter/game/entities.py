"""
Game entity dataclasses and the factories that spawn them
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Tuple

import numpy as np

from shooter.configs.game_config import ASTEROID_CONFIG, EXPLOSION_CONFIG, PLAYER_CONFIG, CANNON_CONFIG
from shooter.engine.events import Events, Key
from shooter.engine.geometry import Rectangle
from shooter.engine.gfx import AnimatedSprite, AnimatedSpriteDescr, ImageLoader, Renderer, Sprite
from shooter.errors import AssetLoadError, ConfigError
from shooter.game.bullets import Bullet, CannonType, DivergentCannon, RectCannon, SineCannon, spawn_bullets
from shooter.utils import DIAGONAL_FACTOR, axis, sign, uniform

log = logging.getLogger(__name__)

PLAYER_W = PLAYER_CONFIG["width"]
PLAYER_H = PLAYER_CONFIG["height"]
PLAYER_SPEED = PLAYER_CONFIG["speed"]
PLAYER_MAX_LIVES = PLAYER_CONFIG["max_lives"]

ASTEROID_SIDE = ASTEROID_CONFIG["side"]

EXPLOSION_SIDE = EXPLOSION_CONFIG["side"]
EXPLOSION_FPS = EXPLOSION_CONFIG["fps"]
EXPLOSION_DURATION = 1.0 / EXPLOSION_FPS * EXPLOSION_CONFIG["total_frames"]


# ----------------------------
# Player
# ----------------------------

class PlayerFrame(IntEnum):
    """Ship sprite index, row = vertical motion, column = horizontal motion"""
    UP_NORM = 0
    UP_FAST = 1
    UP_SLOW = 2
    MID_NORM = 3
    MID_FAST = 4
    MID_SLOW = 5
    DOWN_NORM = 6
    DOWN_FAST = 7
    DOWN_SLOW = 8

    @classmethod
    def from_motion(cls, dx: float, dy: float) -> "PlayerFrame":
        row = {-1: 0, 0: 3, 1: 6}[sign(dy)]
        col = {0: 0, 1: 1, -1: 2}[sign(dx)]
        return cls(row + col)


@dataclass
class Player:
    """The player's ship"""
    rect: Rectangle
    sprites: List[Sprite]
    current: PlayerFrame = PlayerFrame.MID_NORM
    cannon: CannonType = field(default_factory=RectCannon)
    lives: int = PLAYER_MAX_LIVES
    speed: float = PLAYER_SPEED

    @classmethod
    def new(cls, loader: ImageLoader, output_size: Tuple[float, float]) -> "Player":
        """Slice the 3x3 ship sheet and spawn vertically centered"""
        spritesheet = Sprite.load(loader, PLAYER_CONFIG["path"])
        sprites = []
        for y in range(3):
            for x in range(3):
                sprite = spritesheet.region(Rectangle(PLAYER_W * x, PLAYER_H * y, PLAYER_W, PLAYER_H))
                if sprite is None:
                    raise AssetLoadError(PLAYER_CONFIG["path"], f"ship frame ({x}, {y}) out of bounds")
                sprites.append(sprite)

        _, h = output_size
        rect = Rectangle(PLAYER_CONFIG["start_x"], (h - PLAYER_H) / 2.0, PLAYER_W, PLAYER_H)
        return cls(rect=rect, sprites=sprites)

    def select_cannon(self, events: Events):
        if events.pressed(Key.KEY_1):
            self.cannon = RectCannon()
        if events.pressed(Key.KEY_2):
            self.cannon = SineCannon()
        if events.pressed(Key.KEY_3):
            self.cannon = DivergentCannon()

    def update(self, events: Events, movable_region: Rectangle, elapsed: float):
        """Switch weapons, move with the held arrows and stay inside the movable region"""
        self.select_cannon(events)

        x_dir = axis(events.held(Key.LEFT), events.held(Key.RIGHT))
        y_dir = axis(events.held(Key.UP), events.held(Key.DOWN))

        moved = self.speed * elapsed
        if x_dir and y_dir:
            moved *= DIAGONAL_FACTOR

        dx = x_dir * moved
        dy = y_dir * moved

        rect = self.rect.translate(dx, dy).move_inside(movable_region)
        if rect is None:
            raise ConfigError(f"Player {self.rect} does not fit in movable region {movable_region}")
        self.rect = rect

        self.current = PlayerFrame.from_motion(dx, dy)

    def render(self, renderer: Renderer):
        self.sprites[self.current].render(renderer, self.rect)

    def spawn_bullets(self) -> List[Bullet]:
        """Two bullets on top of the ship's cannons"""
        cannons_x = self.rect.x + CANNON_CONFIG["x_offset"]
        cannon1_y = self.rect.y + CANNON_CONFIG["top_y_offset"]
        cannon2_y = self.rect.y + PLAYER_H - CANNON_CONFIG["bottom_y_offset"]
        return spawn_bullets(self.cannon, cannons_x, cannon1_y, cannon2_y)


# ----------------------------
# Asteroids
# ----------------------------

@dataclass
class Asteroid:
    """Rock drifting leftward across the screen"""
    sprite: AnimatedSprite
    bounds: Rectangle
    vel: float

    def update(self, dt: float) -> Optional["Asteroid"]:
        self.bounds = self.bounds.translate(-dt * self.vel, 0.0)
        self.sprite.add_time(dt)

        if self.bounds.x <= -self.bounds.w:
            return None
        return self

    def rect(self) -> Rectangle:
        return self.bounds

    def render(self, renderer: Renderer):
        self.sprite.render(renderer, self.bounds)


class AsteroidFactory:
    """Spawns asteroids sharing one sliced sprite sheet"""

    def __init__(self, loader: ImageLoader, rng: np.random.Generator, **config):
        cfg = {**ASTEROID_CONFIG, **config}
        self.side = cfg["side"]
        self.fps_range = cfg["fps_range"]
        self.vel_range = cfg["vel_range"]
        self.rng = rng

        frames = AnimatedSprite.load_frames(loader, AnimatedSpriteDescr(
            image_path=cfg["path"],
            total_frames=cfg["total_frames"],
            frames_high=cfg["frames_high"],
            frames_wide=cfg["frames_wide"],
            frame_w=self.side,
            frame_h=self.side,
        ))
        self.sprite = AnimatedSprite.with_fps(frames, cfg["template_fps"])
        log.debug("Loaded %d asteroid frames from %s", len(frames), cfg["path"])

    def random(self, output_size: Tuple[float, float]) -> Asteroid:
        """Asteroid entering from the right edge at a random height, speed and spin"""
        w, h = output_size

        sprite = self.sprite.clone()
        sprite.set_fps(uniform(self.rng, *self.fps_range))

        return Asteroid(
            sprite=sprite,
            bounds=Rectangle(w, uniform(self.rng, 0.0, h - self.side), self.side, self.side),
            vel=uniform(self.rng, *self.vel_range),
        )


# ----------------------------
# Explosions
# ----------------------------

@dataclass
class Explosion:
    """Plays its animation once, then expires; never collides"""
    sprite: AnimatedSprite
    rect: Rectangle
    alive_since: float = 0.0
    duration: float = EXPLOSION_DURATION

    def update(self, dt: float) -> Optional["Explosion"]:
        self.alive_since += dt
        self.sprite.add_time(dt)

        if self.alive_since >= self.duration:
            return None
        return self

    def render(self, renderer: Renderer):
        self.sprite.render(renderer, self.rect)


class ExplosionFactory:
    """Spawns explosions centered on destroyed asteroids"""

    def __init__(self, loader: ImageLoader, **config):
        cfg = {**EXPLOSION_CONFIG, **config}
        self.side = cfg["side"]

        frames = AnimatedSprite.load_frames(loader, AnimatedSpriteDescr(
            image_path=cfg["path"],
            total_frames=cfg["total_frames"],
            frames_high=cfg["frames_high"],
            frames_wide=cfg["frames_wide"],
            frame_w=self.side,
            frame_h=self.side,
        ))
        self.sprite = AnimatedSprite.with_fps(frames, cfg["fps"])

    def at_center(self, center: Tuple[float, float]) -> Explosion:
        return Explosion(
            sprite=self.sprite.clone(),
            rect=Rectangle.with_size(self.side, self.side).center_at(center),
            duration=self.sprite.duration(),
        )
