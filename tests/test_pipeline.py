import json

import numpy as np
import pytest

from lane_boundary.cli import main
from lane_boundary.geometry import LineSegment, as_segments
from lane_boundary.pipeline import LaneEstimate, estimate_lanes
from lane_boundary.roi import InvalidFrameDimensions


def test_empty_segments_give_absent_lanes():
    estimate = estimate_lanes(640, 480, [])
    assert estimate == LaneEstimate(left=None, right=None)
    assert estimate.is_empty
    assert estimate.lines() == []


def test_left_only_scenario_640x480():
    estimate = estimate_lanes(640, 480, [LineSegment(100, 400, 300, 100)])
    assert estimate.right is None
    assert estimate.left.as_tuple() == (300, 99, 639, -409)
    assert all(isinstance(v, int) for v in estimate.left.as_tuple())


def test_both_sides_from_hough_array():
    raw = np.array(
        [[[100, 400, 300, 100]], [[0, 10, 100, 60]], [[0, 30, 100, 180]], [[0, 200, 100, 200]]],
        dtype=np.int32,
    )
    estimate = estimate_lanes(640, 480, as_segments(raw))
    assert estimate.to_dict() == {"left": [300, 99, 639, -409], "right": [640, 660, 300, 320]}
    assert not any(np.isnan(v) for line in estimate.lines() for v in line)


def test_invalid_frame_raises():
    with pytest.raises(InvalidFrameDimensions):
        estimate_lanes(0, 480, [LineSegment(100, 400, 300, 100)])


def test_cli_estimate_prints_json(tmp_path, capsys):
    segments = tmp_path / "segments.json"
    segments.write_text(json.dumps([[100, 400, 300, 100]]))
    assert main(["estimate", "--width", "640", "--height", "480", "--segments", str(segments)]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out == {"left": [300, 99, 639, -409], "right": None}
