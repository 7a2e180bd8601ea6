from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

Point = Tuple[int, ...]
Row = List[int]


class Frame(BaseModel):
    model_config = ConfigDict(frozen=True)

    frame_id: int
    points: Tuple[Point, ...] = ()

    def __len__(self) -> int:
        return len(self.points)


class MatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_error: float = 0.0
    last_xoffset: float = 0.0
    last_yoffset: float = 0.0
    matched: int = 0


class AggregateResult(BaseModel):
    """Sequence-level counts and mean spatial errors over true positives."""

    model_config = ConfigDict(frozen=True)

    total_groundtruth: int = 0
    total_detected: int = 0
    true_pos: int = 0
    false_pos: int = 0
    false_neg: int = 0
    error: float = 0.0
    xoffset: float = 0.0
    yoffset: float = 0.0
    missed_frames: List[int] = Field(default_factory=list)

    @property
    def precision(self) -> float:
        return self.true_pos / self.total_detected if self.total_detected else 0.0

    @property
    def recall(self) -> float:
        return self.true_pos / self.total_groundtruth if self.total_groundtruth else 0.0
