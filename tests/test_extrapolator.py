from lane_boundary.averager import AveragedLine
from lane_boundary.extrapolator import Side, extrapolate
from lane_boundary.roi import build_trapezoid

TRAP = build_trapezoid(640, 480)


def test_left_lane_runs_from_near_to_far_edge():
    seg = extrapolate(Side.LEFT, AveragedLine(-1.5, 550.0, 1), TRAP)
    assert (seg.x1, seg.y1) == (300, 99)
    assert (seg.x2, seg.y2) == (639, -409)


def test_right_lane_runs_from_far_to_near_edge():
    seg = extrapolate(Side.RIGHT, AveragedLine(1.0, 20.0, 2), TRAP)
    assert (seg.x1, seg.y1) == (640, 660)
    assert (seg.x2, seg.y2) == (300, 320)


def test_undefined_line_is_absent():
    assert extrapolate(Side.LEFT, None, TRAP) is None
    assert extrapolate(Side.RIGHT, None, TRAP) is None


def test_parallel_edge_defaults_endpoint_to_origin():
    m_near, b_near = TRAP.near_edge.edge_slope_intercept(1e-4)
    left = extrapolate(Side.LEFT, AveragedLine(m_near, b_near + 5, 1), TRAP)
    assert (left.x1, left.y1) == (0, 0)
    assert (left.x2, left.y2) != (0, 0)

    right = extrapolate(Side.RIGHT, AveragedLine(m_near, b_near + 5, 1), TRAP)
    assert (right.x2, right.y2) == (0, 0)
