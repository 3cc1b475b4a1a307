from typing import Sequence

from .config import BEZIER_TIGHTNESS
from .math import Point, sub, dot, unit


def bezier_control_points(pts: Sequence[Point], tightness: float = BEZIER_TIGHTNESS) -> list[Point]:
    """
    Estimate two cubic Bezier control points per interior knot.

    For knot b with neighbours a and c, the chord a->c gives the tangent
    direction. The (a, b) and (c, b) legs are projected on it and scaled by
    `tightness`, giving one control point before b and one after:
      [before(1), after(1), before(2), after(2), ..., after(n-2)]

    Returns 2 * (n - 2) points, or [] when fewer than 3 knots are given.
    """
    n = len(pts)
    if n < 3:
        return []
    out: list[Point] = []
    for i in range(1, n - 1):
        a, b, c = pts[i - 1], pts[i], pts[i + 1]
        # zero when a == c, then both controls collapse onto b
        ac = unit(sub(c, a))

        proj = abs(dot(sub(b, a), ac))
        out.append((b[0] - tightness * proj * ac[0],
                    b[1] - tightness * proj * ac[1]))

        ca = (-ac[0], -ac[1])
        proj = abs(dot(sub(b, c), ca))
        out.append((b[0] - tightness * proj * ca[0],
                    b[1] - tightness * proj * ca[1]))
    return out
