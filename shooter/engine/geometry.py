"""
Rectangle value type and the alive flag used by the collision pass
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle in world units, y grows downward"""
    x: float
    y: float
    w: float
    h: float

    def __post_init__(self):
        if self.w < 0 or self.h < 0:
            raise ValueError(f"Rectangle size must be non-negative, got {self.w}x{self.h}")

    @classmethod
    def with_size(cls, w: float, h: float) -> "Rectangle":
        return cls(0.0, 0.0, w, h)

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def contains(self, other: "Rectangle") -> bool:
        """True when every edge of `other` lies inside self, edges included"""
        return (
            self.x <= other.x <= self.right
            and self.x <= other.right <= self.right
            and self.y <= other.y <= self.bottom
            and self.y <= other.bottom <= self.bottom
        )

    def overlaps(self, other: "Rectangle") -> bool:
        """Open-interval test: rectangles that only touch do not overlap"""
        return (
            self.x < other.right
            and self.right > other.x
            and self.y < other.bottom
            and self.bottom > other.y
        )

    def move_inside(self, parent: "Rectangle") -> Optional["Rectangle"]:
        """
        Clamp self within parent.

        Returns None when self is wider or taller than parent.
        """
        if self.w > parent.w or self.h > parent.h:
            return None

        if self.x < parent.x:
            x = parent.x
        elif self.right >= parent.right:
            x = parent.right - self.w
        else:
            x = self.x

        if self.y < parent.y:
            y = parent.y
        elif self.bottom >= parent.bottom:
            y = parent.bottom - self.h
        else:
            y = self.y

        return replace(self, x=x, y=y)

    def center(self) -> Tuple[float, float]:
        return self.x + self.w / 2.0, self.y + self.h / 2.0

    def center_at(self, center: Tuple[float, float]) -> "Rectangle":
        cx, cy = center
        return replace(self, x=cx - self.w / 2.0, y=cy - self.h / 2.0)

    def translate(self, dx: float, dy: float) -> "Rectangle":
        return replace(self, x=self.x + dx, y=self.y + dy)

    def flip_y(self, height: float) -> "Rectangle":
        """Mirror into a y-up frame of the given height"""
        return replace(self, y=height - self.y - self.h)



@dataclass
class MaybeAlive(Generic[T]):
    """Value paired with a per-tick alive flag"""
    value: T
    alive: bool = True

    def as_option(self) -> Optional[T]:
        return self.value if self.alive else None
