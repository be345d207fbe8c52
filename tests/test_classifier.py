from lane_boundary.classifier import classify_segments, filter_segments, in_noise_band
from lane_boundary.config import DEFAULT_CONFIG, LaneConfig
from lane_boundary.geometry import LineSegment

MIXED = [
    LineSegment(100, 400, 300, 100),  # -56°, left
    LineSegment(0, 10, 100, 60),  # 26°, right
    LineSegment(0, 200, 100, 200),  # 0°, noise
    LineSegment(50, 0, 51, 100),  # 89°, noise
    LineSegment(0, 0, 10, 100),  # 84°, noise
    LineSegment(0, 100, 100, 95),  # -3°, noise
    LineSegment(0, 300, 200, 200),  # -26.6°, left
    LineSegment(0, 30, 100, 180),  # 56°, right
]


def test_noise_bands_are_inclusive():
    bands = DEFAULT_CONFIG.noise_bands
    for angle in (-90.0, -60.0, 60.0, 90.0, -10.0, 10.0, 0.0):
        assert in_noise_band(angle, bands)
    for angle in (-59.9, -10.1, 10.1, 59.9, 120.0, -150.0):
        assert not in_noise_band(angle, bands)


def test_horizontal_segment_is_rejected():
    candidates = classify_segments([LineSegment(0, 200, 100, 200)])
    assert candidates.left == ()
    assert candidates.right == ()


def test_empty_input_gives_empty_buckets():
    candidates = classify_segments([])
    assert candidates.left == () and candidates.right == ()


def test_filter_is_idempotent():
    once = filter_segments(MIXED)
    assert filter_segments(once) == once
    assert len(once) == 4


def test_buckets_are_sign_consistent_and_disjoint():
    candidates = classify_segments(MIXED)
    assert len(candidates.left) == 2
    assert len(candidates.right) == 2
    assert all(slope < 0 for slope, _ in candidates.left)
    assert all(slope >= 0 for slope, _ in candidates.right)
    assert not set(candidates.left) & set(candidates.right)


def test_zero_slope_goes_right_when_filter_lets_it_through():
    # a right-to-left horizontal segment has angle 180° and passes the bands
    candidates = classify_segments([LineSegment(100, 50, 0, 50)])
    assert candidates.left == ()
    assert len(candidates.right) == 1
    assert candidates.right[0][0] == 0


def test_vertical_segment_excluded_without_noise_bands():
    config = LaneConfig(noise_bands=())
    candidates = classify_segments([LineSegment(5, 0, 5, 100)], config)
    assert candidates.left == () and candidates.right == ()
