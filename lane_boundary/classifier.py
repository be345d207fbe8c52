import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from .config import DEFAULT_CONFIG, Band, LaneConfig
from .geometry import LineSegment

logger = logging.getLogger(__name__)

SlopeIntercept = Tuple[float, float]


@dataclass(frozen=True)
class Candidates:
    left: Tuple[SlopeIntercept, ...] = ()
    right: Tuple[SlopeIntercept, ...] = ()


def in_noise_band(angle: float, bands: Sequence[Band]) -> bool:
    return any(low <= angle <= high for low, high in bands)


def filter_segments(
    segments: Iterable[LineSegment],
    config: Optional[LaneConfig] = None,
) -> Tuple[LineSegment, ...]:
    """Drop near-vertical and near-horizontal segments by angle."""
    cfg = config or DEFAULT_CONFIG
    return tuple(seg for seg in segments if not in_noise_band(seg.angle_degrees, cfg.noise_bands))


def classify_segments(
    segments: Iterable[LineSegment],
    config: Optional[LaneConfig] = None,
) -> Candidates:
    """
    Bucket segments into left/right slope-intercept candidates.

    Negative slopes go left, everything else right. Vertical segments have no
    slope and are left out of both buckets.
    """
    left = []
    right = []
    for seg in filter_segments(segments, config):
        si = seg.slope_intercept()
        if si is None:
            logger.debug("Skipping vertical segment %s", seg.as_tuple())
            continue
        slope, intercept = si
        logger.debug(
            "Segment angle=%.2f slope=%.4f intercept=%.2f",
            seg.angle_degrees,
            slope,
            intercept,
        )
        (left if slope < 0 else right).append(si)

    return Candidates(left=tuple(left), right=tuple(right))
