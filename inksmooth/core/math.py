import math
from typing import Literal

Point = tuple[float, float]
Op = tuple[Literal["M", "L", "C", "S"], tuple]


def sub(a: Point, b: Point) -> Point:
    return a[0] - b[0], a[1] - b[1]


def dot(a: Point, b: Point) -> float:
    return a[0] * b[0] + a[1] * b[1]


def unit(v: Point) -> Point:
    """
    Normalize v. A zero-length vector stays (0, 0) instead of dividing by zero,
    which happens whenever a stroke repeats a sample point.
    """
    length = math.hypot(v[0], v[1])
    if length == 0.0:
        return 0.0, 0.0
    return v[0] / length, v[1] / length


def sign(v: float) -> float:
    return 1.0 if v > 0 else (-1.0 if v < 0 else 0.0)


def as_point(p) -> Point:
    return float(p[0]), float(p[1])
