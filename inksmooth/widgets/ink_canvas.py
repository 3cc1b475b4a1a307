from PySide6 import QtCore, QtGui, QtWidgets

from inksmooth.core import PointPath, Point, stroke_builder_registry


def _sample_at(e: QtGui.QMouseEvent) -> Point:
    pos = e.position()
    return float(pos.x()), float(pos.y())


class InkCanvasWidget(QtWidgets.QWidget):
    """
    Freehand ink capture. Every press/drag/release adds one sub-path of raw
    mouse samples; the smoothed result is painted over the raw trace.
    """
    strokesChanged = QtCore.Signal(int)    # emitted when a stroke is finished or the canvas cleared, arg = stroke count

    def __init__(self, builder: str = "spline", parent=None):
        super().__init__(parent)
        self._path = PointPath(builder=builder)
        self._drawing = False
        self._show_raw = True
        self._pen_width = 2.0

        self.setMouseTracking(False)
        self.setCursor(QtCore.Qt.CursorShape.CrossCursor)
        self.setMinimumSize(200, 200)

    # ---- convenience accessors ---------------------------------------------
    @property
    def path(self) -> PointPath:
        return self._path

    @property
    def builder(self) -> str:
        return self._path.builder

    def set_builder(self, name: str):
        if name not in stroke_builder_registry:
            return
        self._path.builder = name
        self.update()

    def set_show_raw(self, show: bool):
        self._show_raw = bool(show)
        self.update()

    def clear(self):
        self._path.clear()
        self.strokesChanged.emit(len(self._path))
        self.update()

    # ---- mouse events -------------------------------------------------------
    def mousePressEvent(self, e: QtGui.QMouseEvent):
        if e.button() == QtCore.Qt.MouseButton.RightButton:
            self.clear()
            return
        if e.button() == QtCore.Qt.MouseButton.LeftButton:
            self._drawing = True
            self._path.new_sub_path()
            self._path.add_point(_sample_at(e))
            self.update()

    def mouseMoveEvent(self, e: QtGui.QMouseEvent):
        if not self._drawing:
            return
        self._path.add_point(_sample_at(e))
        self.update()

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent):
        if e.button() == QtCore.Qt.MouseButton.LeftButton and self._drawing:
            self._drawing = False
            self.strokesChanged.emit(len(self._path))
            self.update()

    # ---- painting -----------------------------------------------------------
    def paintEvent(self, _):
        if not self._path.sub_paths:
            return
        p = QtGui.QPainter(self)
        p.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)

        if self._show_raw:
            p.setPen(QtGui.QPen(QtGui.QColor(200, 0, 0, 90), 1.0, QtCore.Qt.PenStyle.DashLine))
            for pts in self._path.sub_paths:
                for a, b in zip(pts, pts[1:]):
                    p.drawLine(QtCore.QPointF(*a), QtCore.QPointF(*b))

        pen = QtGui.QPen(QtGui.QColor(0, 0, 0, 220), self._pen_width)
        pen.setCapStyle(QtCore.Qt.PenCapStyle.RoundCap)
        pen.setJoinStyle(QtCore.Qt.PenJoinStyle.RoundJoin)
        p.setPen(pen)
        p.drawPath(self._path.make_qpath())
        p.end()
