import math
from typing import Iterable, List, Sequence, Tuple

from fingertip_eval.core.models import Point


def planar_distance(a: Sequence[float], b: Sequence[float]) -> float:
    return math.sqrt((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2)


class CandidatePool:
    """Detected points still available for matching within one frame.

    Each point can be taken once; remaining points keep their input order.
    """

    def __init__(self, points: Iterable[Point]) -> None:
        self._points: List[Point] = list(points)

    def __len__(self) -> int:
        return len(self._points)

    def __bool__(self) -> bool:
        return bool(self._points)

    def nearest(self, point: Sequence[float]) -> Tuple[int, float]:
        if not self._points:
            raise LookupError("Candidate pool is empty")
        best_index = 0
        best_distance = math.inf
        for index, candidate in enumerate(self._points):
            distance = planar_distance(point, candidate)
            # strict comparison keeps the first of equally distant candidates
            if distance < best_distance:
                best_index, best_distance = index, distance
        return best_index, best_distance

    def take(self, index: int) -> Point:
        return self._points.pop(index)
