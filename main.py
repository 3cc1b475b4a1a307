import logging
import sys

from PySide6 import QtWidgets

from inksmooth.core import stroke_builder_registry
from inksmooth.widgets import InkCanvasWidget


class MyWidget(QtWidgets.QWidget):
    def __init__(self):
        super().__init__()

        self.layout = QtWidgets.QVBoxLayout(self)
        self.top_bar = QtWidgets.QHBoxLayout()

        self.canvas = InkCanvasWidget(parent=self)

        self.builder_box = QtWidgets.QComboBox(self)
        self.builder_box.addItems(list(stroke_builder_registry))
        self.builder_box.currentTextChanged.connect(self.canvas.set_builder)

        self.raw_box = QtWidgets.QCheckBox("Raw samples", self)
        self.raw_box.setChecked(True)
        self.raw_box.toggled.connect(self.canvas.set_show_raw)

        self.count_label = QtWidgets.QLabel(self)
        self.canvas.strokesChanged.connect(self.on_strokes_changed)
        self.on_strokes_changed(0)

        self.clear_button = QtWidgets.QPushButton("Clear", self)
        self.clear_button.clicked.connect(self.canvas.clear)

        self.top_bar.addWidget(self.builder_box)
        self.top_bar.addWidget(self.raw_box)
        self.top_bar.addStretch(1)
        self.top_bar.addWidget(self.count_label)
        self.top_bar.addWidget(self.clear_button)

        self.layout.addLayout(self.top_bar)
        self.layout.addWidget(self.canvas, stretch=1)

    def on_strokes_changed(self, count: int):
        self.count_label.setText(f"{count} stroke" + ("" if count == 1 else "s"))


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")
    app = QtWidgets.QApplication([])

    widget = MyWidget()
    widget.resize(800, 600)
    widget.show()

    sys.exit(app.exec())
