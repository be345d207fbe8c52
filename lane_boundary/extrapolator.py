import logging
from enum import Enum
from typing import Optional

from .averager import AveragedLine
from .config import DEFAULT_CONFIG, LaneConfig
from .geometry import LineSegment, intersect
from .roi import Trapezoid

logger = logging.getLogger(__name__)


class Side(str, Enum):
    LEFT = "left"
    RIGHT = "right"


def extrapolate(
    side: Side,
    line: Optional[AveragedLine],
    trapezoid: Trapezoid,
    config: Optional[LaneConfig] = None,
) -> Optional[LineSegment]:
    """
    Clip an averaged lane line to the trapezoid's near and far edges.

    The left lane starts on the near edge and ends on the far edge; the right
    lane runs the other way. An endpoint whose edge is parallel to the line
    stays at (0, 0). Returns None when `line` is None.
    """
    if line is None:
        return None
    cfg = config or DEFAULT_CONFIG

    near = intersect(line.slope, line.intercept, trapezoid.near_edge, cfg.edge_epsilon)
    far = intersect(line.slope, line.intercept, trapezoid.far_edge, cfg.edge_epsilon)
    if side is Side.LEFT:
        start, end = near, far
    else:
        start, end = far, near

    x1, y1 = start if start is not None else (0, 0)
    x2, y2 = end if end is not None else (0, 0)
    if start is None or end is None:
        logger.debug("%s lane: no intersection with one trapezoid edge", side.value)

    return LineSegment(x1, y1, x2, y2)
