import math
from dataclasses import dataclass
from typing import Sequence

from .math import Point


@dataclass(frozen=True)
class CubicSegment:
    """p(u) = a*u^3 + b*u^2 + c*u + d on the local interval u in [0, 1]."""
    a: float
    b: float
    c: float
    d: float

    def eval(self, u: float) -> float:
        return ((self.a * u + self.b) * u + self.c) * u + self.d


def solve_natural_cubic(values: Sequence[float]) -> tuple[CubicSegment, ...]:
    """
    Interpolate `values` (one per knot) with a natural cubic spline.

    The knot derivatives D[0..m] solve the tridiagonal system

        [2 1        ] [D0]   [3(v1 - v0)      ]
        [1 4 1      ] [D1]   [3(v2 - v0)      ]
        [  ...      ] [..] = [      ...       ]
        [     1 4 1 ] [  ]   [3(vm - v(m-2))  ]
        [       1 2 ] [Dm]   [3(vm - v(m-1))  ]

    by forward elimination and back substitution (Thomas algorithm). The
    pivots only depend on m, so repeated knot values just give flat segments.
    """
    m = len(values) - 1
    if m < 1:
        raise ValueError(f"a cubic spline needs at least 2 values, got {len(values)}")
    v = [float(x) for x in values]

    gamma = [0.0] * (m + 1)
    delta = [0.0] * (m + 1)
    D = [0.0] * (m + 1)

    gamma[0] = 0.5
    for i in range(1, m):
        gamma[i] = 1.0 / (4.0 - gamma[i - 1])
    gamma[m] = 1.0 / (2.0 - gamma[m - 1])

    delta[0] = 3.0 * (v[1] - v[0]) * gamma[0]
    for i in range(1, m):
        delta[i] = (3.0 * (v[i + 1] - v[i - 1]) - delta[i - 1]) * gamma[i]
    delta[m] = (3.0 * (v[m] - v[m - 1]) - delta[m - 1]) * gamma[m]

    D[m] = delta[m]
    for i in range(m - 1, -1, -1):
        D[i] = delta[i] - gamma[i] * D[i + 1]

    return tuple(
        CubicSegment(
            a=2.0 * (v[i] - v[i + 1]) + D[i] + D[i + 1],
            b=3.0 * (v[i + 1] - v[i]) - 2.0 * D[i] - D[i + 1],
            c=D[i],
            d=v[i],
        )
        for i in range(m)
    )


class ParametricSpline:
    """
    Two axis splines of the same knot sequence, evaluated over u in [0, 1].

    Each knot interval spans 1/m of the parameter range regardless of how far
    apart its points are.
    """

    def __init__(self, xs: Sequence[CubicSegment], ys: Sequence[CubicSegment]):
        if len(xs) != len(ys):
            raise ValueError(f"axis splines differ in length: {len(xs)} x segments, {len(ys)} y segments")
        if not xs:
            raise ValueError("a parametric spline needs at least one segment")
        self._xs = tuple(xs)
        self._ys = tuple(ys)

    @classmethod
    def from_points(cls, pts: Sequence[Point]) -> "ParametricSpline":
        return cls(solve_natural_cubic([p[0] for p in pts]),
                   solve_natural_cubic([p[1] for p in pts]))

    @property
    def segment_count(self) -> int:
        return len(self._xs)

    @property
    def x_segments(self) -> tuple[CubicSegment, ...]:
        return self._xs

    @property
    def y_segments(self) -> tuple[CubicSegment, ...]:
        return self._ys

    def point_at(self, u: float) -> Point:
        u = min(1.0, max(0.0, float(u)))
        m = len(self._xs)
        scaled = u * m
        idx = int(math.floor(min(m - 1, scaled)))
        local = scaled - idx
        return self._xs[idx].eval(local), self._ys[idx].eval(local)

    def sample(self, count: int) -> list[Point]:
        if count < 2:
            raise ValueError(f"need at least 2 samples, got {count}")
        last = count - 1
        return [self.point_at(k / last) for k in range(count)]
