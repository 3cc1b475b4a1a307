from dataclasses import dataclass

SAMPLE_COUNT = 101
CORNER_THRESHOLD = 5.0
CORNER_FRACTION = 0.2
BEZIER_TIGHTNESS = 0.5


@dataclass(frozen=True)
class SmoothingConfig:
    """
    Knobs of the spline stroke builder:
      - sample_count: samples per sub-path, taken at u = k / (sample_count - 1)
      - corner_threshold: a step must exceed this on both axes to get a corner waypoint
      - corner_fraction: how far along the step the waypoint sits
    """
    sample_count: int = SAMPLE_COUNT
    corner_threshold: float = CORNER_THRESHOLD
    corner_fraction: float = CORNER_FRACTION

    def __post_init__(self):
        if self.sample_count < 2:
            raise ValueError(f"sample_count must be at least 2, got {self.sample_count}")
