from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from .classifier import Candidates, SlopeIntercept


@dataclass(frozen=True)
class AveragedLine:
    slope: float
    intercept: float
    sample_count: int


def average_candidates(candidates: Sequence[SlopeIntercept]) -> Optional[AveragedLine]:
    """
    Plain mean of slopes and of intercepts.

    Returns None when there is nothing to average; callers treat that side as
    having no lane this frame.
    """
    if not candidates:
        return None
    values = np.asarray(candidates, dtype=float)
    return AveragedLine(
        slope=float(np.mean(values[:, 0])),
        intercept=float(np.mean(values[:, 1])),
        sample_count=len(candidates),
    )


def average_lanes(candidates: Candidates) -> Tuple[Optional[AveragedLine], Optional[AveragedLine]]:
    return average_candidates(candidates.left), average_candidates(candidates.right)
