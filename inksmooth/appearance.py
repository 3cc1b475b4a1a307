"""
PDF content-stream emission for ink annotations.

Wraps the path ops of every stroke in the graphics state the annotation asks
for (stroke colour, line width, dash pattern, constant opacity) and encodes
them as page-description operators:

    q
    /GS0 gs
    1 0 0 RG
    [3 2] 0 d
    2 w
    10 20 m
    11.5 21 l
    ...
    S
    Q
"""
import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from .core.builders import StrokeBuilder, SplineStrokeBuilder
from .core.math import Op, Point

logger = logging.getLogger(__name__)


@dataclass
class InkStyle:
    """
      - color: 1 (gray), 3 (RGB) or 4 (CMYK) components in [0, 1]; empty means invisible
      - width: border width; 0 means invisible
      - dash: optional dash array
      - opacity: constant opacity; below 1 a named ExtGState is selected
    """
    color: tuple[float, ...] = (0.0,)
    width: float = 1.0
    dash: list[float] | None = None
    opacity: float = 1.0
    ext_gstate: str = "GS0"

    def is_visible(self) -> bool:
        return bool(self.color) and self.width != 0


def _num(v: float) -> str:
    s = f"{v:.4f}".rstrip("0").rstrip(".")
    return "0" if s in ("", "-0") else s


def _pt(p: Point) -> str:
    return f"{_num(p[0])} {_num(p[1])}"


def _color_op(color: Sequence[float]) -> bytes:
    comps = " ".join(_num(c) for c in color)
    if len(color) == 1:
        return f"{comps} G".encode()
    if len(color) == 3:
        return f"{comps} RG".encode()
    if len(color) == 4:
        return f"{comps} K".encode()
    raise ValueError(f"Unsupported colour with {len(color)} components")


def encode_ops(ops: Iterable[Op]) -> list[bytes]:
    """Path ops -> content-stream operator lines."""
    lines: list[bytes] = []
    open_path = False
    for op, data in ops:
        if op == "M":
            lines.append(f"{_pt(data)} m".encode())
            open_path = True
        elif op == "L":
            if not open_path:
                # a lone dot still needs a current point
                lines.append(f"{_pt(data)} m".encode())
                open_path = True
            lines.append(f"{_pt(data)} l".encode())
        elif op == "C":
            c1, c2, p2 = data
            lines.append(f"{_pt(c1)} {_pt(c2)} {_pt(p2)} c".encode())
        elif op == "S":
            lines.append(b"S")
            open_path = False
        else:
            raise ValueError(f"Unknown path op {op!r}")
    return lines


def ink_appearance_stream(sub_paths: Iterable[Sequence[Point]], style: InkStyle,
                          builder: StrokeBuilder | None = None) -> bytes:
    """
    Content stream for the normal appearance of an ink annotation. Returns
    b"" when the style makes the annotation invisible.
    """
    if not style.is_visible():
        logger.debug("ink annotation not drawn: color=%r width=%r", style.color, style.width)
        return b""
    builder = builder or SplineStrokeBuilder()

    lines: list[bytes] = [b"q"]
    if style.opacity < 1:
        lines.append(f"/{style.ext_gstate} gs".encode())
    lines.append(_color_op(style.color))
    if style.dash is not None:
        dash = " ".join(_num(d) for d in style.dash)
        lines.append(f"[{dash}] 0 d".encode())
    lines.append(f"{_num(style.width)} w".encode())
    lines.extend(encode_ops(builder.build_ink_path(sub_paths)))
    lines.append(b"Q")
    return b"\n".join(lines) + b"\n"
