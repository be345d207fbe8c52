"""Lane boundary estimation (Hough segments → two extrapolated lane lines)."""

from .averager import AveragedLine, average_candidates, average_lanes
from .classifier import Candidates, classify_segments, filter_segments
from .config import DEFAULT_CONFIG, LaneConfig
from .extrapolator import Side, extrapolate
from .geometry import LineSegment, Point, as_segments, intersect
from .pipeline import (
    LaneDetectionResult,
    LaneEstimate,
    detect_lanes,
    estimate_lanes,
    generate_synthetic_lane,
)
from .roi import InvalidFrameDimensions, Trapezoid, build_trapezoid, region_of_interest

__all__ = [
    "AveragedLine",
    "Candidates",
    "DEFAULT_CONFIG",
    "InvalidFrameDimensions",
    "LaneConfig",
    "LaneDetectionResult",
    "LaneEstimate",
    "LineSegment",
    "Point",
    "Side",
    "Trapezoid",
    "as_segments",
    "average_candidates",
    "average_lanes",
    "build_trapezoid",
    "classify_segments",
    "detect_lanes",
    "estimate_lanes",
    "extrapolate",
    "filter_segments",
    "generate_synthetic_lane",
    "intersect",
    "region_of_interest",
]
