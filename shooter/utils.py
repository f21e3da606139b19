"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math
from typing import Optional
import numpy as np


DIAGONAL_FACTOR = 1.0 / math.sqrt(2.0)


def sign(x: float) -> int:
    """Return -1, 0 or 1 according to the sign of x"""
    return (x > 0) - (x < 0)


def axis(negative: bool, positive: bool) -> int:
    """Collapse a pair of opposing held keys into -1, 0 or 1"""
    if negative == positive:
        return 0
    return 1 if positive else -1


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the generator used for spawn parameters"""
    return np.random.default_rng(seed)


def uniform(rng: np.random.Generator, lo: float, hi: float) -> float:
    """Draw one float in [lo, hi) as a plain python float"""
    return float(rng.uniform(lo, hi))
