"""
Sprites, animations and the rendering collaborators they talk to
-----------------------------------------------------------------
- Sprite: a region of a shared image
- AnimatedSprite: shared frame tuple + per-instance playback clock
- Renderer / ImageLoader / TextRenderer: host-side capabilities

The core only issues draw requests; the host (see shooter.host) owns the
window, the textures and the actual blitting.
"""

from __future__ import annotations

import math
import weakref
from dataclasses import dataclass, field, replace
from typing import Callable, Dict, Generic, Optional, Protocol, Sequence, Tuple, TypeVar

from shooter.engine.geometry import Rectangle
from shooter.errors import AnimationConfigError, AssetLoadError

Color = Tuple[int, int, int]
T = TypeVar("T")


class Image(Protocol):
    """Decoded image owned by the host"""
    width: int
    height: int


class ImageLoader(Protocol):
    def load_image(self, path: str) -> Image:
        """Load an image, raising AssetLoadError on failure"""
        ...


class Renderer(Protocol):
    def output_size(self) -> Tuple[float, float]:
        ...

    def clear(self, color: Color) -> None:
        ...

    def draw(self, sprite: "Sprite", dest: Rectangle) -> None:
        ...

    def fill_rect(self, rect: Rectangle, color: Color) -> None:
        ...


class TextRenderer(Protocol):
    def render_text(self, text: str, font_path: str, size: int, color: Color) -> "Sprite":
        ...


# ----------------------------
# Static sprites
# ----------------------------

@dataclass(frozen=True)
class Sprite:
    """A rectangular region of an image shared with other sprites"""
    image: Image = field(compare=False)
    src: Rectangle

    @classmethod
    def new(cls, image: Image) -> "Sprite":
        return cls(image, Rectangle(0.0, 0.0, float(image.width), float(image.height)))

    @classmethod
    def load(cls, loader: ImageLoader, path: str) -> "Sprite":
        return cls.new(loader.load_image(path))

    def region(self, rect: Rectangle) -> Optional["Sprite"]:
        """Sub-sprite at `rect` relative to this sprite, None if it does not fit"""
        new_src = rect.translate(self.src.x, self.src.y)
        if not self.src.contains(new_src):
            return None
        return Sprite(self.image, new_src)

    def size(self) -> Tuple[float, float]:
        return self.src.w, self.src.h

    def render(self, renderer: Renderer, dest: Rectangle):
        renderer.draw(self, dest)


class RegionCache(Generic[T]):
    """
    Host-side textures cut out of shared images, one per (image, src).

    Entries are weakly keyed by the image, so a view's sheets and labels
    leave the cache as soon as the last sprite referencing them is dropped.
    """

    def __init__(self, crop: Callable[[Image, Rectangle], T]):
        self.crop = crop
        self._regions: "weakref.WeakKeyDictionary[Image, Dict[Rectangle, T]]" = weakref.WeakKeyDictionary()

    def get(self, sprite: Sprite) -> T:
        regions = self._regions.setdefault(sprite.image, {})
        region = regions.get(sprite.src)
        if region is None:
            region = self.crop(sprite.image, sprite.src)
            # A full-size crop may be the image itself, which must not pin its own key
            if region is sprite.image:
                return region
            regions[sprite.src] = region
        return region

    def __len__(self) -> int:
        return sum(len(regions) for regions in self._regions.values())


# ----------------------------
# Animations
# ----------------------------

@dataclass(frozen=True)
class AnimatedSpriteDescr:
    """Where and how to slice a sprite sheet into frames"""
    image_path: str
    total_frames: int
    frames_high: int
    frames_wide: int
    frame_w: float
    frame_h: float


def _delay_for(fps: float) -> float:
    if fps == 0:
        raise AnimationConfigError("fps must be non-zero")
    return 1.0 / fps


@dataclass
class AnimatedSprite:
    """
    Frame sequence plus a playback clock.

    `frames` is an immutable tuple shared by every clone, so spawning many
    animated entities from one template costs only the clock.
    """
    frames: Tuple[Sprite, ...]
    frame_delay: float
    current_time: float = 0.0

    def __post_init__(self):
        if not self.frames:
            raise AnimationConfigError("an animation needs at least one frame")
        if self.frame_delay <= 0:
            raise AnimationConfigError(f"frame_delay must be positive, got {self.frame_delay}")

    @staticmethod
    def load_frames(loader: ImageLoader, descr: AnimatedSpriteDescr) -> Tuple[Sprite, ...]:
        """Slice a sprite sheet row-major, stopping at descr.total_frames"""
        spritesheet = Sprite.load(loader, descr.image_path)
        frames = []

        for yth in range(descr.frames_high):
            for xth in range(descr.frames_wide):
                if descr.frames_wide * yth + xth >= descr.total_frames:
                    break

                frame = spritesheet.region(Rectangle(
                    descr.frame_w * xth,
                    descr.frame_h * yth,
                    descr.frame_w,
                    descr.frame_h,
                ))
                if frame is None:
                    raise AssetLoadError(
                        descr.image_path,
                        f"frame ({xth}, {yth}) lies outside the {spritesheet.size()} sheet",
                    )
                frames.append(frame)

        return tuple(frames)

    @classmethod
    def with_fps(cls, frames: Sequence[Sprite], fps: float) -> "AnimatedSprite":
        return cls(tuple(frames), _delay_for(fps))

    def clone(self) -> "AnimatedSprite":
        """Copy of the clock that keeps sharing the frame tuple"""
        return replace(self)

    def frame_count(self) -> int:
        return len(self.frames)

    def duration(self) -> float:
        return self.frame_count() * self.frame_delay

    def set_frame_delay(self, frame_delay: float):
        if frame_delay <= 0:
            raise AnimationConfigError(f"frame_delay must be positive, got {frame_delay}")
        self.frame_delay = frame_delay

    def set_fps(self, fps: float):
        self.set_frame_delay(_delay_for(fps))

    def add_time(self, dt: float):
        # Rewinding past zero jumps to the start of the last frame; playing
        # forward wraps only through frame_at's modulo.
        self.current_time += dt
        if self.current_time < 0.0:
            self.current_time = (self.frame_count() - 1) * self.frame_delay

    def frame_at(self, t: float) -> int:
        return math.floor(t / self.frame_delay) % self.frame_count()

    def current_frame(self) -> int:
        return self.frame_at(self.current_time)

    def current_sprite(self) -> Sprite:
        return self.frames[self.current_frame()]

    def render(self, renderer: Renderer, dest: Rectangle):
        self.current_sprite().render(renderer, dest)
