from typing import Sequence

from fingertip_eval.core.candidate_pool import CandidatePool
from fingertip_eval.core.models import MatchResult, Point


class FrameMatcher:
    """Greedily pair groundtruth points with their nearest detected points.

    Groundtruth points are visited in input order and each claims the closest
    detected point still in the pool. The result is not a globally optimal
    assignment. Offsets describe the last matched pair only.
    """

    def match(
        self,
        groundtruth_points: Sequence[Point],
        detected_points: Sequence[Point],
    ) -> MatchResult:
        pool = CandidatePool(detected_points)
        total_error = 0.0
        last_xoffset = 0.0
        last_yoffset = 0.0
        matched = 0
        for gt_point in groundtruth_points:
            if not pool:
                break
            index, distance = pool.nearest(gt_point)
            detected = pool.take(index)
            total_error += distance
            last_xoffset = abs(detected[0] - gt_point[0])
            last_yoffset = abs(detected[1] - gt_point[1])
            matched += 1
        return MatchResult(
            total_error=total_error,
            last_xoffset=last_xoffset,
            last_yoffset=last_yoffset,
            matched=matched,
        )


def match(groundtruth_points: Sequence[Point], detected_points: Sequence[Point]) -> MatchResult:
    return FrameMatcher().match(groundtruth_points, detected_points)
