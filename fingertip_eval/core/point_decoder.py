"""Turn flat numeric rows into fixed-dimension points and frames."""
from __future__ import annotations

from typing import List, Sequence

from fingertip_eval.core.models import Frame, Point

GROUNDTRUTH_DIM = 2
DETECTED_DIM = 3


def decode(coords: Sequence[int], dim: int) -> List[Point]:
    """Group ``coords`` into consecutive points of ``dim`` values.

    Values left over after the last complete group are dropped.
    """

    if dim < 1:
        raise ValueError(f"Point dimension must be >= 1, got {dim}")
    num_points = len(coords) // dim
    return [tuple(coords[i * dim : (i + 1) * dim]) for i in range(num_points)]


def frame_from_row(row: Sequence[int], dim: int) -> Frame:
    if not row:
        raise ValueError("Cannot build a frame from an empty row")
    return Frame(frame_id=int(row[0]), points=decode(row[1:], dim))
