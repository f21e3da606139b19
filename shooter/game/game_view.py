"""
GameView - the in-game world and its per-tick update
-----------------------------------------------------
- One player ship steered with the arrow keys, firing with space
- Three cannon types selected with 1 / 2 / 3
- Asteroids spawned at random from the right edge
- Asteroids destroyed by bullets or by ramming the ship, leaving explosions
- Three lives; losing the last one returns to the main menu

Every tick rebuilds the entity lists from the previous ones instead of
mutating them while iterating, and stages new entities until the pass that
produced them has finished.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from shooter.configs.game_config import BACKGROUND_CONFIG, GAME_CONFIG
from shooter.engine.events import Key
from shooter.engine.geometry import MaybeAlive, Rectangle
from shooter.engine.gfx import Renderer
from shooter.engine.view import Context, View, ViewAction
from shooter.game.background import Background
from shooter.game.bullets import Bullet
from shooter.game.entities import (
    Asteroid,
    AsteroidFactory,
    Explosion,
    ExplosionFactory,
    Player,
)
from shooter.utils import make_rng

log = logging.getLogger(__name__)


def to_main_menu() -> ViewAction:
    from shooter.game.main_menu import MainMenuView
    return ViewAction.change(MainMenuView)


class GameView(View):
    """The playing field"""

    def __init__(
        self,
        ctx: Context,
        seed: Optional[int] = GAME_CONFIG["seed"],
        asteroid_spawn_chance: float = GAME_CONFIG["asteroid_spawn_chance"],
        movable_fraction: float = GAME_CONFIG["movable_fraction"],
        clear_color: Tuple[int, int, int] = GAME_CONFIG["clear_color"],
    ):
        self.asteroid_spawn_chance = asteroid_spawn_chance
        self.movable_fraction = movable_fraction
        self.clear_color = clear_color
        self.rng = make_rng(seed)

        # World state
        self.player = Player.new(ctx.loader, ctx.output_size())
        self.bullets: List[Bullet] = []
        self.asteroids: List[Asteroid] = []
        self.explosions: List[Explosion] = []

        # Factories load their sheets once
        self.asteroid_factory = AsteroidFactory(ctx.loader, self.rng)
        self.explosion_factory = ExplosionFactory(ctx.loader)

        self.bg_back = Background.load(ctx.loader, **BACKGROUND_CONFIG["back"])
        self.bg_middle = Background.load(ctx.loader, **BACKGROUND_CONFIG["middle"])
        self.bg_front = Background.load(ctx.loader, **BACKGROUND_CONFIG["front"])

        log.info("New game started with %d lives", self.player.lives)

    # ----------------------------
    # Tick
    # ----------------------------

    def update(self, ctx: Context, elapsed: float) -> ViewAction:
        events = ctx.events
        output_size = ctx.output_size()

        if events.quit:
            return ViewAction.quit()

        if events.pressed(Key.ESCAPE):
            return to_main_menu()

        self.player.update(events, self.movable_region(output_size), elapsed)

        self._update_entities(output_size, elapsed)

        player_hit = self._handle_collisions()

        if player_hit:
            self.player.lives -= 1
            log.info("Player lives: %d", self.player.lives)

        if self.player.lives <= 0:
            log.info("Out of lives, back to the main menu")
            return to_main_menu()

        self._spawn_logic(ctx, output_size)

        for bg in self.backgrounds():
            bg.advance(elapsed)

        return ViewAction.none()

    def movable_region(self, output_size: Tuple[float, float]) -> Rectangle:
        """Left part of the screen; the right margin is where asteroids enter"""
        w, h = output_size
        return Rectangle(0.0, 0.0, w * self.movable_fraction, h)

    def _update_entities(self, output_size: Tuple[float, float], elapsed: float):
        self.bullets = [
            b for b in (bullet.update(output_size, elapsed) for bullet in self.bullets)
            if b is not None
        ]
        self.asteroids = [
            a for a in (asteroid.update(elapsed) for asteroid in self.asteroids)
            if a is not None
        ]
        self.explosions = [
            e for e in (explosion.update(elapsed) for explosion in self.explosions)
            if e is not None
        ]

    def _handle_collisions(self) -> bool:
        """
        Destroy every asteroid touching a bullet or the ship.

        Bullets carry an alive flag for the pass; each destroyed asteroid
        leaves one explosion. Returns whether the ship was hit at least once.
        """
        player_hit = False
        transition_bullets = [MaybeAlive(bullet) for bullet in self.bullets]
        new_explosions: List[Explosion] = []
        remaining: List[Asteroid] = []

        for asteroid in self.asteroids:
            asteroid_alive = True
            rect = asteroid.rect()

            for bullet in transition_bullets:
                if rect.overlaps(bullet.value.rect()):
                    asteroid_alive = False
                    bullet.alive = False

            if rect.overlaps(self.player.rect):
                asteroid_alive = False
                player_hit = True

            if asteroid_alive:
                remaining.append(asteroid)
            else:
                new_explosions.append(self.explosion_factory.at_center(rect.center()))

        self.asteroids = remaining
        self.bullets = [b for b in (mb.as_option() for mb in transition_bullets) if b is not None]
        self.explosions.extend(new_explosions)

        return player_hit

    def _spawn_logic(self, ctx: Context, output_size: Tuple[float, float]):
        if ctx.events.pressed(Key.SPACE):
            self.bullets.extend(self.player.spawn_bullets())

        if self.rng.random() < self.asteroid_spawn_chance:
            self.asteroids.append(self.asteroid_factory.random(output_size))
            log.debug("Spawned asteroid, %d on screen", len(self.asteroids))

    # ----------------------------
    # Rendering
    # ----------------------------

    def backgrounds(self) -> Tuple[Background, Background, Background]:
        return self.bg_back, self.bg_middle, self.bg_front

    def render(self, renderer: Renderer):
        renderer.clear(self.clear_color)

        self.bg_back.render(renderer)
        self.bg_middle.render(renderer)

        self.player.render(renderer)

        for bullet in self.bullets:
            bullet.render(renderer)

        for asteroid in self.asteroids:
            asteroid.render(renderer)

        for explosion in self.explosions:
            explosion.render(renderer)

        self.bg_front.render(renderer)
