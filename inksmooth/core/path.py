import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence, TYPE_CHECKING

from .builders import StrokeBuilder
from .math import Point, Op, as_point
from .registries import get_stroke_builder

if TYPE_CHECKING:
    from PySide6 import QtGui

logger = logging.getLogger(__name__)

DOT_EPSILON = 1e-3


@dataclass()
class PointPath:
    """
      - sub_paths: disconnected strokes, each an ordered list of samples
      - builder: registry name of the stroke builder used when none is passed in
      - params: opaque bag for per-annotation settings (kept as-is on round trips)
    """
    sub_paths: list[list[Point]] = field(default_factory=list)
    builder: str = "spline"
    params: dict[str, float] = field(default_factory=dict)

    @classmethod
    def from_ink_list(cls, ink_list: Iterable[Sequence[float]]) -> "PointPath":
        """
        Build from flat [x0, y0, x1, y1, ...] arrays, one per stroke. A dangling
        x coordinate is dropped.
        """
        sub_paths: list[list[Point]] = []
        for i, coords in enumerate(ink_list):
            coords = [float(c) for c in coords]
            if len(coords) % 2:
                logger.warning("Ink sub-path %d has an odd coordinate count (%d), dropping the last value",
                               i, len(coords))
                coords = coords[:-1]
            sub_paths.append([(coords[j], coords[j + 1]) for j in range(0, len(coords), 2)])
        return cls(sub_paths=sub_paths)

    def to_ink_list(self) -> list[list[float]]:
        return [[c for p in pts for c in p] for pts in self.sub_paths]

    def add_point(self, p: Point) -> "PointPath":
        if not self.sub_paths:
            self.sub_paths.append([])
        self.sub_paths[-1].append(as_point(p))
        return self

    def new_sub_path(self) -> "PointPath":
        if not self.sub_paths or self.sub_paths[-1]:
            self.sub_paths.append([])
        return self

    def clear(self):
        self.sub_paths = []
        self.params = {}

    def __len__(self):
        return len(self.sub_paths)

    def path_ops(self, builder: StrokeBuilder | None = None) -> list[Op]:
        builder = builder or get_stroke_builder(self.builder)
        return builder.build_ink_path(self.sub_paths)

    # ---- serialization -------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "sub_paths": [[list(p) for p in pts] for pts in self.sub_paths],
            "builder": self.builder,
            "params": dict(self.params),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PointPath":
        sub_paths = [[as_point(p) for p in pts] for pts in data["sub_paths"]]
        builder = data.get("builder", "spline")
        params = dict(data.get("params", {}))
        return cls(sub_paths=sub_paths, builder=builder, params=params)

    def make_qpath(self, builder: StrokeBuilder | None = None) -> "QtGui.QPainterPath":
        return ops_to_qpath(self.path_ops(builder))


def ops_to_qpath(ops: Iterable[Op]) -> "QtGui.QPainterPath":
    from PySide6 import QtCore, QtGui

    qp = QtGui.QPainterPath()
    qpf = lambda t: QtCore.QPointF(t[0], t[1])

    open_path = False
    current: Point | None = None
    for op, data in ops:
        if op == "M":
            qp.moveTo(qpf(data))
            open_path = True
            current = data
        elif op == "L":
            if not open_path:
                # a lone dot has no moveTo of its own
                qp.moveTo(qpf(data))
                open_path = True
                current = data
            if current is not None and tuple(data) == tuple(current):
                # Qt drops zero-length lines, which would leave nothing to stroke
                qp.lineTo(QtCore.QPointF(data[0] + DOT_EPSILON, data[1]))
            else:
                qp.lineTo(qpf(data))
            current = data
        elif op == "C":
            c1, c2, p2 = data
            qp.cubicTo(qpf(c1), qpf(c2), qpf(p2))
            current = p2
        elif op == "S":
            # sub-paths stay open; the next op starts a new one
            open_path = False
            current = None
    return qp
