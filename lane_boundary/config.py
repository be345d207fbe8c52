from dataclasses import dataclass
from typing import Tuple

Band = Tuple[float, float]


@dataclass(frozen=True)
class LaneConfig:
    """
    Tuned constants for one camera mounting.

    The defaults are fixed heuristics (noise bands in degrees, trapezoid
    offsets in pixels); they are kept as-is rather than derived.
    """

    # angle bands rejected as ROI-edge artifacts / horizontal noise (inclusive)
    noise_bands: Tuple[Band, ...] = ((-90.0, -60.0), (60.0, 90.0), (-10.0, 10.0))

    # trapezoid: near corners sit at (W/2 - x_offset, H/2 -/+ half_height)
    trapezoid_x_offset: float = 20.0
    trapezoid_half_height: float = 150.0

    # added to the x-denominator of trapezoid edge slopes
    edge_epsilon: float = 1e-4

    gaussian_kernel: int = 3
    gaussian_sigma: float = 3.0
    canny_low: int = 80
    canny_high: int = 100

    hough_rho: float = 1.0
    hough_theta_deg: float = 1.0
    hough_threshold: int = 50
    min_line_length: int = 30
    max_line_gap: int = 10


DEFAULT_CONFIG = LaneConfig()
