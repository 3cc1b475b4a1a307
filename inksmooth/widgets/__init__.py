from .ink_canvas import InkCanvasWidget

__all__ = [
    "InkCanvasWidget",
]
