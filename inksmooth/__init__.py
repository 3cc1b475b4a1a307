from .core import (
    Point, Op, SmoothingConfig, CubicSegment, ParametricSpline, solve_natural_cubic,
    bezier_control_points, StrokeBuilder, SplineStrokeBuilder, BezierStrokeBuilder,
    stroke_builder_registry, get_stroke_builder, PointPath,
)
from .appearance import InkStyle, ink_appearance_stream

__all__ = [
    "Point",
    "Op",
    "SmoothingConfig",
    "CubicSegment",
    "ParametricSpline",
    "solve_natural_cubic",
    "bezier_control_points",
    "StrokeBuilder",
    "SplineStrokeBuilder",
    "BezierStrokeBuilder",
    "stroke_builder_registry",
    "get_stroke_builder",
    "PointPath",
    "InkStyle",
    "ink_appearance_stream",
]
