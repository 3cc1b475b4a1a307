from .math import Point, Op
from .config import SmoothingConfig, SAMPLE_COUNT, CORNER_THRESHOLD, CORNER_FRACTION, BEZIER_TIGHTNESS
from .bezier import bezier_control_points
from .splines import CubicSegment, ParametricSpline, solve_natural_cubic
from .builders import StrokeBuilder, SplineStrokeBuilder, BezierStrokeBuilder
from .registries import stroke_builder_registry, register_stroke_builder, get_stroke_builder
from .path import PointPath, ops_to_qpath
