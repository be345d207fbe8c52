import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import cv2
import numpy as np

from .averager import average_lanes
from .classifier import classify_segments
from .config import DEFAULT_CONFIG, LaneConfig
from .extrapolator import Side, extrapolate
from .geometry import Line, LineSegment, as_segments, to_int_line
from .roi import Trapezoid, build_trapezoid, region_of_interest

logger = logging.getLogger(__name__)

LANE_COLOR = (0, 0, 255)
FAR_CORNER_COLOR = (0, 255, 0)
NEAR_CORNER_COLOR = (255, 0, 255)


@dataclass(frozen=True)
class LaneEstimate:
    """Left and right lane lines for one frame; None marks an absent side."""

    left: Optional[LineSegment] = None
    right: Optional[LineSegment] = None

    @property
    def is_empty(self) -> bool:
        return self.left is None and self.right is None

    def lines(self) -> List[Line]:
        return [to_int_line(seg) for seg in (self.left, self.right) if seg is not None]

    def to_dict(self) -> dict:
        return {
            "left": None if self.left is None else list(to_int_line(self.left)),
            "right": None if self.right is None else list(to_int_line(self.right)),
        }


@dataclass(frozen=True)
class LaneDetectionResult:
    edges: np.ndarray
    masked_edges: np.ndarray
    segments: List[LineSegment]
    estimate: LaneEstimate
    overlay: np.ndarray


def estimate_lanes(
    width: int,
    height: int,
    segments: Iterable[LineSegment],
    config: Optional[LaneConfig] = None,
) -> LaneEstimate:
    """Turn raw detector segments into one line per lane side."""
    cfg = config or DEFAULT_CONFIG
    trapezoid = build_trapezoid(width, height, cfg)

    candidates = classify_segments(segments, cfg)
    left_avg, right_avg = average_lanes(candidates)

    estimate = LaneEstimate(
        left=extrapolate(Side.LEFT, left_avg, trapezoid, cfg),
        right=extrapolate(Side.RIGHT, right_avg, trapezoid, cfg),
    )
    logger.debug(
        "Lanes from %d left / %d right candidates: %s",
        len(candidates.left),
        len(candidates.right),
        estimate.to_dict(),
    )
    return estimate


def _to_gray(bgr: np.ndarray) -> np.ndarray:
    if bgr.ndim == 2:
        return bgr
    return cv2.cvtColor(bgr, cv2.COLOR_BGR2GRAY)


def _blur(gray: np.ndarray, k: int, sigma: float) -> np.ndarray:
    k = int(k)
    if k <= 0 or k % 2 == 0:
        raise ValueError("gaussian_kernel must be a positive odd integer")
    return cv2.GaussianBlur(gray, (k, k), sigmaX=sigma, sigmaY=sigma)


def detect_edges(image: np.ndarray, config: Optional[LaneConfig] = None) -> np.ndarray:
    cfg = config or DEFAULT_CONFIG
    blurred = _blur(_to_gray(image), cfg.gaussian_kernel, cfg.gaussian_sigma)
    return cv2.Canny(blurred, int(cfg.canny_low), int(cfg.canny_high))


def hough_segments(masked_edges: np.ndarray, config: Optional[LaneConfig] = None) -> List[LineSegment]:
    cfg = config or DEFAULT_CONFIG
    lines = cv2.HoughLinesP(
        masked_edges,
        rho=float(cfg.hough_rho),
        theta=cfg.hough_theta_deg * np.pi / 180.0,
        threshold=int(cfg.hough_threshold),
        minLineLength=float(cfg.min_line_length),
        maxLineGap=float(cfg.max_line_gap),
    )
    return as_segments(lines)


def draw_overlay(image: np.ndarray, estimate: LaneEstimate, trapezoid: Trapezoid, thickness: int = 2) -> np.ndarray:
    """Draw the present lane lines and the trapezoid corners on a copy of `image`."""
    overlay = image.copy()
    for x1, y1, x2, y2 in estimate.lines():
        cv2.line(overlay, (x1, y1), (x2, y2), LANE_COLOR, int(thickness))

    for corner, color in (
        (trapezoid.top_right, FAR_CORNER_COLOR),
        (trapezoid.bottom_right, FAR_CORNER_COLOR),
        (trapezoid.upper_left, NEAR_CORNER_COLOR),
        (trapezoid.lower_left, NEAR_CORNER_COLOR),
    ):
        cv2.circle(overlay, (int(corner.x), int(corner.y)), 5, color, 5)
    return overlay


def detect_lanes(image: np.ndarray, config: Optional[LaneConfig] = None) -> LaneDetectionResult:
    if image is None or image.size == 0:
        raise ValueError("Empty image provided")
    cfg = config or DEFAULT_CONFIG

    height, width = image.shape[:2]
    trapezoid = build_trapezoid(width, height, cfg)

    edges = detect_edges(image, cfg)
    masked_edges = region_of_interest(edges, trapezoid)
    segments = hough_segments(masked_edges, cfg)
    logger.debug("Hough returned %d segments", len(segments))

    estimate = estimate_lanes(width, height, segments, cfg)
    if image.ndim == 2:
        image = cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)

    return LaneDetectionResult(
        edges=edges,
        masked_edges=masked_edges,
        segments=segments,
        estimate=estimate,
        overlay=draw_overlay(image, estimate, trapezoid),
    )


def generate_synthetic_lane(
    width: int = 640,
    height: int = 480,
    spread_px: int = 200,
    thickness: int = 6,
) -> np.ndarray:
    """
    Draw two straight lane markings diverging from the trapezoid's near edge.

    The lanes start 30 px right of the near edge, 20 px either side of the
    horizontal centre, and open up by `spread_px` towards the right border.
    """
    img = np.full((height, width, 3), 40, dtype=np.uint8)
    cx = int(width / 2 - DEFAULT_CONFIG.trapezoid_x_offset) + 30
    cy = height // 2

    markings: Tuple[Tuple[Tuple[int, int], Tuple[int, int]], ...] = (
        ((cx, cy - 20), (width - 1, cy - 20 - spread_px)),
        ((cx, cy + 20), (width - 1, cy + 20 + spread_px)),
    )
    for start, end in markings:
        cv2.line(img, start, end, (255, 255, 255), int(thickness))
    return img
