import logging
from abc import ABC, abstractmethod
from typing import Callable, Iterable, Sequence, override

from .bezier import bezier_control_points
from .config import SmoothingConfig, BEZIER_TIGHTNESS
from .math import Point, Op, as_point, sign
from .registries import register_stroke_builder
from .splines import ParametricSpline

logger = logging.getLogger(__name__)

TraceHook = Callable[[int, float, Point], None]


class StrokeBuilder(ABC):
    """
    Turns sub-paths of raw ink samples into drawing ops:
      - ("M", (x,y))       moveTo
      - ("L", (x,y))       lineTo
      - ("C", (c1,c2,p2))  curveTo
      - ("S", ())          stroke
    """

    @abstractmethod
    def build_path(self, pts: Sequence[Point], /) -> list[Op]:
        """
        Ops for a single sub-path, ending with a stroke. Empty sub-paths give [].
        """

    def build_ink_path(self, sub_paths: Iterable[Sequence[Point]], /) -> list[Op]:
        """
        Ops for every sub-path of an ink annotation, in order. A sub-path that
        fails is logged and skipped so the remaining strokes still render.
        """
        ops: list[Op] = []
        for i, pts in enumerate(sub_paths):
            try:
                ops.extend(self.build_path([as_point(p) for p in pts]))
            except (TypeError, ValueError, IndexError) as exc:
                logger.warning("Skipping ink sub-path %d: %s", i, exc)
        return ops

    @staticmethod
    def _dot(p: Point) -> list[Op]:
        # a zero-length line renders as a dot once stroked
        return [("L", p), ("S", ())]


@register_stroke_builder("spline")
class SplineStrokeBuilder(StrokeBuilder):
    """
    Natural cubic spline through every sample, flattened to line segments.

    Sharp turns between distant knots make the spline swing past the corner;
    when a flattened step is longer than the threshold on both axes an extra
    waypoint is inserted before it.
    """

    def __init__(self, config: SmoothingConfig | None = None, trace: TraceHook | None = None):
        self.config = config or SmoothingConfig()
        self.trace = trace

    @override
    def build_path(self, pts: Sequence[Point], /) -> list[Op]:
        n = len(pts)
        if n == 0:
            return []
        if n == 1:
            return self._dot(as_point(pts[0]))

        spline = ParametricSpline.from_points(pts)
        last = self.config.sample_count - 1
        ops: list[Op] = []
        prev2: Point | None = None
        prev: Point | None = None
        corners = 0
        for k in range(self.config.sample_count):
            u = k / last
            cur = spline.point_at(u)
            if self.trace is not None:
                self.trace(k, u, cur)
            if prev is None:
                ops.append(("M", cur))
            else:
                if prev2 is not None:
                    corner = self._corner_waypoint(prev2, prev, cur)
                    if corner is not None:
                        ops.append(("L", corner))
                        corners += 1
                ops.append(("L", cur))
            prev2, prev = prev, cur
        ops.append(("S", ()))
        logger.debug("spline stroke: %d knots, %d samples, %d corner waypoints",
                     n, self.config.sample_count, corners)
        return ops

    def _corner_waypoint(self, prev2: Point, prev: Point, cur: Point) -> Point | None:
        d1x, d1y = cur[0] - prev[0], cur[1] - prev[1]
        limit = self.config.corner_threshold
        if abs(d1x) <= limit or abs(d1y) <= limit:
            return None
        d2x, d2y = prev[0] - prev2[0], prev[1] - prev2[1]
        # follow the previous heading on each axis, so a reversal keeps turning
        sx = sign(d2x) or sign(d1x)
        sy = sign(d2y) or sign(d1y)
        f = self.config.corner_fraction
        return prev[0] + sx * abs(d1x) * f, prev[1] + sy * abs(d1y) * f


@register_stroke_builder("bezier")
class BezierStrokeBuilder(StrokeBuilder):
    """
    Piecewise cubic Bezier through the samples, control points from
    bezier_control_points(). The end segments borrow the end knot as their
    outer control point.
    """

    def __init__(self, tightness: float = BEZIER_TIGHTNESS):
        self.tightness = tightness

    @override
    def build_path(self, pts: Sequence[Point], /) -> list[Op]:
        n = len(pts)
        if n == 0:
            return []
        pts = [as_point(p) for p in pts]
        if n == 1:
            return self._dot(pts[0])
        ops: list[Op] = [("M", pts[0])]
        if n == 2:
            ops.append(("L", pts[1]))
            ops.append(("S", ()))
            return ops

        ctrl = bezier_control_points(pts, self.tightness)
        ops.append(("C", (pts[0], ctrl[0], pts[1])))
        for i in range(2, n - 1):
            ops.append(("C", (ctrl[2 * i - 3], ctrl[2 * i - 2], pts[i])))
        ops.append(("C", (ctrl[-1], pts[-1], pts[-1])))
        ops.append(("S", ()))
        return ops
