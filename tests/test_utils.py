from __future__ import annotations

import math

from shooter.utils import DIAGONAL_FACTOR, axis, make_rng, sign, uniform


def test_sign() -> None:
    assert [sign(-2.5), sign(0.0), sign(0.1)] == [-1, 0, 1]


def test_axis_cancels_opposing_keys() -> None:
    assert axis(False, False) == 0
    assert axis(True, True) == 0
    assert axis(True, False) == -1
    assert axis(False, True) == 1


def test_diagonal_factor_keeps_speed() -> None:
    assert math.isclose(math.hypot(DIAGONAL_FACTOR, DIAGONAL_FACTOR), 1.0)


def test_seeded_rng_is_reproducible() -> None:
    a = make_rng(5)
    b = make_rng(5)
    draws = [uniform(a, 10.0, 30.0) for _ in range(10)]
    assert draws == [uniform(b, 10.0, 30.0) for _ in range(10)]
    assert all(10.0 <= d < 30.0 for d in draws)
    assert all(type(d) is float for d in draws)
