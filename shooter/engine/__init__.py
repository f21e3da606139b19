"""Engine layer - geometry, sprites, input and views"""

from .geometry import Rectangle, MaybeAlive
from .gfx import Sprite, AnimatedSprite, AnimatedSpriteDescr, RegionCache
from .events import Events, Key
from .view import Context, View, ViewAction, ViewMachine
from .loop import FixedTicker

__all__ = [
    'Rectangle', 'MaybeAlive',
    'Sprite', 'AnimatedSprite', 'AnimatedSpriteDescr', 'RegionCache',
    'Events', 'Key',
    'Context', 'View', 'ViewAction', 'ViewMachine', 'FixedTicker',
]
