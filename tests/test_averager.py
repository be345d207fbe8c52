from lane_boundary.averager import average_candidates, average_lanes
from lane_boundary.classifier import Candidates, classify_segments
from lane_boundary.geometry import LineSegment


def test_empty_bucket_is_undefined():
    assert average_candidates(()) is None
    assert average_lanes(Candidates()) == (None, None)


def test_single_sample_is_returned_exactly():
    line = average_candidates([(-1.5, 550.0)])
    assert line.slope == -1.5
    assert line.intercept == 550.0
    assert line.sample_count == 1


def test_right_side_mean():
    candidates = classify_segments([LineSegment(0, 10, 100, 60), LineSegment(0, 30, 100, 180)])
    left, right = average_lanes(candidates)
    assert left is None
    assert right.slope == 1.0
    assert right.intercept == 20.0
    assert right.sample_count == 2
