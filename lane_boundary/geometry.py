from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

Line = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class LineSegment:
    x1: float
    y1: float
    x2: float
    y2: float

    @classmethod
    def between(cls, a: Point, b: Point) -> "LineSegment":
        return cls(a.x, a.y, b.x, b.y)

    @property
    def angle_degrees(self) -> float:
        return float(np.arctan2(self.y2 - self.y1, self.x2 - self.x1) * 180.0 / np.pi)

    def slope_intercept(self) -> Optional[Tuple[float, float]]:
        """Slope/intercept form, or None for a vertical segment."""
        if self.x2 == self.x1:
            return None
        slope = (self.y2 - self.y1) / (self.x2 - self.x1)
        intercept = self.y1 - slope * self.x1
        return slope, intercept

    def edge_slope_intercept(self, eps: float) -> Tuple[float, float]:
        """Slope/intercept with `eps` added to the run so vertical edges stay finite."""
        slope = (self.y2 - self.y1) / (self.x2 - self.x1 + eps)
        intercept = self.y1 - slope * self.x1
        return slope, intercept

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return self.x1, self.y1, self.x2, self.y2


def intersect(
    slope: float,
    intercept: float,
    edge: LineSegment,
    eps: float = 1e-4,
) -> Optional[Tuple[int, int]]:
    """
    Intersect the line y = slope * x + intercept with the line through `edge`.

    Returns the crossing point truncated toward zero, or None when the two
    slopes are exactly equal.
    """
    m2, b2 = edge.edge_slope_intercept(eps)
    if slope == m2:
        return None
    x = (intercept - b2) / (m2 - slope)
    y = slope * x + intercept
    return int(x), int(y)


def as_segments(raw) -> List[LineSegment]:
    """
    Normalise detector output into LineSegments.

    Accepts None, an iterable of (x1, y1, x2, y2), or the (N, 1, 4) array
    returned by cv2.HoughLinesP.
    """
    if raw is None:
        return []
    if isinstance(raw, np.ndarray):
        raw = raw.reshape((-1, 4)).tolist()
    return [LineSegment(*(float(v) for v in seg)) for seg in raw]


def to_int_line(segment: LineSegment) -> Line:
    return int(segment.x1), int(segment.y1), int(segment.x2), int(segment.y2)
