from dataclasses import dataclass
from typing import Optional, Tuple

import cv2
import numpy as np

from .config import DEFAULT_CONFIG, LaneConfig
from .geometry import LineSegment, Point


class InvalidFrameDimensions(ValueError):
    """Raised when a frame has a non-positive width or height."""


@dataclass(frozen=True)
class Trapezoid:
    """
    Region of interest for one frame.

    The far side runs along the right border of the frame; the near side is a
    short vertical edge just left of the frame centre.
    """

    top_right: Point
    bottom_right: Point
    upper_left: Point
    lower_left: Point

    @property
    def left_edge(self) -> LineSegment:
        return LineSegment.between(self.top_right, self.upper_left)

    @property
    def right_edge(self) -> LineSegment:
        return LineSegment.between(self.lower_left, self.bottom_right)

    @property
    def near_edge(self) -> LineSegment:
        return LineSegment.between(self.upper_left, self.lower_left)

    @property
    def far_edge(self) -> LineSegment:
        return LineSegment.between(self.top_right, self.bottom_right)

    def corners(self) -> Tuple[Point, Point, Point, Point]:
        return self.top_right, self.bottom_right, self.lower_left, self.upper_left

    def polygon(self) -> np.ndarray:
        return np.array([[int(p.x), int(p.y)] for p in self.corners()], dtype=np.int32)


def build_trapezoid(width: int, height: int, config: Optional[LaneConfig] = None) -> Trapezoid:
    cfg = config or DEFAULT_CONFIG
    if width <= 0 or height <= 0:
        raise InvalidFrameDimensions(f"Frame dimensions must be positive, got {width}x{height}")

    near_x = width / 2 - cfg.trapezoid_x_offset
    return Trapezoid(
        top_right=Point(float(width), 0.0),
        bottom_right=Point(float(width), float(height)),
        upper_left=Point(near_x, height / 2 - cfg.trapezoid_half_height),
        lower_left=Point(near_x, height / 2 + cfg.trapezoid_half_height),
    )


def region_of_interest(image: np.ndarray, trapezoid: Trapezoid) -> np.ndarray:
    """Zero every pixel outside the trapezoid."""
    mask = np.zeros_like(image)
    fill = 255 if image.ndim == 2 else (255,) * image.shape[2]
    cv2.fillPoly(mask, [trapezoid.polygon()], fill)
    return cv2.bitwise_and(image, mask)
