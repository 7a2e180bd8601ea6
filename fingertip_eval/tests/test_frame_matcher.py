import math

import pytest

from fingertip_eval.core.candidate_pool import CandidatePool
from fingertip_eval.core.frame_matcher import FrameMatcher, match


def test_pool_take_consumes_each_point_once() -> None:
    pool = CandidatePool([(0, 0, 1), (5, 5, 1), (9, 9, 1)])

    index, distance = pool.nearest((5, 6))
    taken = pool.take(index)

    assert taken == (5, 5, 1)
    assert distance == pytest.approx(1.0)
    assert len(pool) == 2
    # the taken point is gone, so the same query now lands on the next closest
    assert pool.take(pool.nearest((5, 6))[0]) == (9, 9, 1)


def test_pool_nearest_prefers_first_on_ties() -> None:
    pool = CandidatePool([(2, 0, 0), (-2, 0, 0), (0, 2, 0)])

    index, distance = pool.nearest((0, 0))

    assert index == 0
    assert distance == pytest.approx(2.0)


def test_pool_nearest_on_empty_pool() -> None:
    with pytest.raises(LookupError):
        CandidatePool([]).nearest((0, 0))


def test_match_identical_points_has_zero_error() -> None:
    result = match([(3, 4), (10, 10)], [(10, 10, 0), (3, 4, 0)])

    assert result.matched == 2
    assert result.total_error == 0.0
    assert result.last_xoffset == 0.0
    assert result.last_yoffset == 0.0


def test_match_keeps_offsets_of_last_pair_only() -> None:
    groundtruth = [(0, 0), (100, 100)]
    detected = [(3, 4, 0), (101, 98, 0)]

    result = FrameMatcher().match(groundtruth, detected)

    assert result.total_error == pytest.approx(5.0 + 5 ** 0.5)
    assert result.last_xoffset == 1
    assert result.last_yoffset == 2


def test_match_is_greedy_in_groundtruth_order() -> None:
    # The first groundtruth point claims the shared nearest candidate even
    # though swapping would lower the total error.
    groundtruth = [(1, 0), (0, 0)]
    detected = [(0, 0, 0), (10, 0, 0)]

    result = match(groundtruth, detected)

    assert result.matched == 2
    assert result.total_error == pytest.approx(1.0 + 10.0)
    assert result.last_xoffset == 10


def test_match_stops_when_pool_is_exhausted() -> None:
    result = match([(0, 0), (50, 50), (60, 60)], [(49, 50, 0)])

    assert result.matched == 1
    assert result.total_error == pytest.approx(math.hypot(49, 50))
    assert result.last_xoffset == 49
    assert result.last_yoffset == 50


def test_match_never_exceeds_smaller_side() -> None:
    groundtruth = [(0, 0)]
    detected = [(1, 1, 0), (2, 2, 0), (3, 3, 0)]

    assert match(groundtruth, detected).matched == 1
    assert match([], detected).matched == 0
    assert match(groundtruth, []).matched == 0


def test_match_does_not_mutate_detected_input() -> None:
    detected = [(1, 1, 0), (2, 2, 0)]

    match([(0, 0), (5, 5)], detected)

    assert detected == [(1, 1, 0), (2, 2, 0)]
