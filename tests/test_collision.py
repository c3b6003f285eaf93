import numpy as np

from clothsim.collision import nearest_within, segments_intersect, segments_intersect_many


def test_crossing_segments_intersect():
    assert segments_intersect((0, 0), (100, 100), (0, 100), (100, 0))


def test_far_collinear_segment_does_not_intersect():
    assert not segments_intersect((0, 0), (100, 100), (200, 200), (300, 300))


def test_parallel_segments_do_not_intersect():
    assert not segments_intersect((0, 0), (100, 0), (0, 10), (100, 10))


def test_vectorised_test_matches_scalar_test():
    starts = np.array([[0, 100], [200, 200], [50, -10], [0, 10]], dtype=float)
    ends = np.array([[100, 0], [300, 300], [50, 10], [5, 10]], dtype=float)
    hits = segments_intersect_many((0, 0), (100, 100), starts, ends)
    expected = [segments_intersect((0, 0), (100, 100), s, e) for s, e in zip(starts, ends)]
    assert hits.tolist() == expected == [True, False, False, False]


def test_nearest_within_picks_closest():
    pts = np.array([[0, 0], [10, 0], [3, 0]], dtype=float)
    assert nearest_within(pts, (4, 0), 50) == 2


def test_nearest_within_ties_go_to_first():
    pts = np.array([[0, 0], [10, 0], [0, 0]], dtype=float)
    assert nearest_within(pts, (0, 0), 50) == 0
    assert nearest_within(pts, (5, 0), 50) == 0


def test_nearest_within_radius_is_strict():
    pts = np.array([[50, 0]], dtype=float)
    assert nearest_within(pts, (0, 0), 50) is None
    assert nearest_within(pts, (0.5, 0), 50) == 0


def test_nearest_within_respects_candidates():
    pts = np.array([[0, 0], [20, 0]], dtype=float)
    assert nearest_within(pts, (0, 0), 50, candidates=[False, True]) == 1
    assert nearest_within(pts, (0, 0), 50, candidates=[False, False]) is None


def test_nearest_within_empty():
    assert nearest_within(np.empty((0, 2)), (0, 0), 50) is None
