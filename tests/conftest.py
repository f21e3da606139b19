from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

import pytest

from shooter.engine.events import Events
from shooter.engine.geometry import Rectangle
from shooter.engine.gfx import Sprite
from shooter.engine.view import Context
from shooter.errors import AssetLoadError

# Sheet sizes matching the real assets' grids
ASSET_SIZES: Dict[str, Tuple[int, int]] = {
    "assets/spaceship.png": (43 * 3, 39 * 3),
    "assets/asteroid.png": (96 * 21, 96 * 7),
    "assets/explosion.png": (96 * 5, 96 * 4),
    "assets/starBG.png": (400, 300),
    "assets/starMG.png": (400, 300),
    "assets/starFG.png": (400, 300),
}


@dataclass(eq=False)
class FakeImage:
    width: int
    height: int
    path: str = ""


@dataclass
class FakeLoader:
    sizes: Dict[str, Tuple[int, int]] = field(default_factory=lambda: dict(ASSET_SIZES))
    loaded: List[str] = field(default_factory=list)

    def load_image(self, path: str) -> FakeImage:
        if path not in self.sizes:
            raise AssetLoadError(path, "no such file")
        self.loaded.append(path)
        w, h = self.sizes[path]
        return FakeImage(w, h, path)


@dataclass
class FakeText:
    rendered: List[Tuple[str, str, int, tuple]] = field(default_factory=list)

    def render_text(self, text, font_path, size, color) -> Sprite:
        self.rendered.append((text, font_path, size, color))
        return Sprite.new(FakeImage(len(text) * size // 2, size, text))


@dataclass
class RecordingRenderer:
    size: Tuple[float, float] = (800.0, 600.0)
    calls: List[tuple] = field(default_factory=list)

    def output_size(self):
        return self.size

    def clear(self, color):
        self.calls.append(("clear", color))

    def draw(self, sprite: Sprite, dest: Rectangle):
        self.calls.append(("draw", sprite, dest))

    def fill_rect(self, rect: Rectangle, color):
        self.calls.append(("fill", rect, color))

    def reset(self):
        self.calls.clear()


@pytest.fixture
def loader() -> FakeLoader:
    return FakeLoader()


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def ctx(loader, renderer) -> Context:
    return Context(events=Events(), renderer=renderer, loader=loader, text=FakeText())


def sheet(width: int, height: int) -> Sprite:
    return Sprite.new(FakeImage(width, height))
