import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtGui = pytest.importorskip("PySide6.QtGui")
from PySide6 import QtCore

from inksmooth.core import BezierStrokeBuilder, PointPath, ops_to_qpath


@pytest.fixture(scope="module")
def qapp():
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


def _inked_pixels(qp, size=20, width=4.0) -> int:
    image = QtGui.QImage(size, size, QtGui.QImage.Format.Format_ARGB32)
    image.fill(QtGui.QColor(255, 255, 255))
    p = QtGui.QPainter(image)
    pen = QtGui.QPen(QtGui.QColor(0, 0, 0), width)
    pen.setCapStyle(QtCore.Qt.PenCapStyle.RoundCap)
    p.setPen(pen)
    p.drawPath(qp)
    p.end()
    return sum(
        1
        for y in range(size)
        for x in range(size)
        if image.pixelColor(x, y).lightness() < 128
    )


def test_spline_qpath_has_one_element_per_sample():
    qp = PointPath.from_ink_list([[0, 0, 5, 0]]).make_qpath()
    assert isinstance(qp, QtGui.QPainterPath)
    assert qp.elementCount() == 101
    end = qp.currentPosition()
    assert (end.x(), end.y()) == pytest.approx((5.0, 0.0))


def test_bezier_qpath_uses_cubics():
    qp = PointPath.from_ink_list([[0, 0, 10, 0, 10, 10, 0, 10]]).make_qpath(BezierStrokeBuilder())
    # moveTo + three cubicTo (three elements each)
    assert qp.elementCount() == 1 + 3 * 3


def test_single_point_keeps_a_drawable_line(qapp):
    qp = PointPath.from_ink_list([[10, 10]]).make_qpath()
    assert qp.elementCount() == 2
    assert qp.elementAt(0).isMoveTo()
    assert qp.elementAt(1).isLineTo()
    assert (qp.elementAt(1).x, qp.elementAt(1).y) == pytest.approx((10.0, 10.0), abs=1e-2)
    assert _inked_pixels(qp) > 0


def test_dot_after_stroke_starts_its_own_sub_path(qapp):
    qp = ops_to_qpath([
        ("M", (0.0, 0.0)), ("L", (5.0, 0.0)), ("S", ()),
        ("L", (15.0, 15.0)), ("S", ()),
    ])
    assert qp.elementCount() == 4
    assert qp.elementAt(2).isMoveTo()
    assert (qp.elementAt(2).x, qp.elementAt(2).y) == (15.0, 15.0)
    assert qp.elementAt(3).isLineTo()
    image_ink = _inked_pixels(qp)
    line_only = _inked_pixels(ops_to_qpath([("M", (0.0, 0.0)), ("L", (5.0, 0.0)), ("S", ())]))
    assert image_ink > line_only


def test_canvas_reports_stroke_count(qapp):
    from inksmooth.widgets import InkCanvasWidget

    canvas = InkCanvasWidget(builder="bezier")
    seen = []
    canvas.strokesChanged.connect(seen.append)
    canvas.path.add_point((1.0, 1.0))
    canvas.set_builder("unknown")
    assert canvas.builder == "bezier"
    canvas.set_builder("spline")
    assert canvas.path.builder == "spline"
    canvas.clear()
    assert seen == [0]
    assert canvas.path.builder == "spline"
