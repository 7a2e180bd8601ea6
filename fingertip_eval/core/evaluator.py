import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from fingertip_eval.core.frame_matcher import FrameMatcher
from fingertip_eval.core.models import AggregateResult, Frame

logger = logging.getLogger(__name__)


@dataclass
class _Totals:
    total_groundtruth: int = 0
    total_detected: int = 0
    true_pos: int = 0
    false_pos: int = 0
    false_neg: int = 0
    error: float = 0.0
    xoffset: float = 0.0
    yoffset: float = 0.0
    missed_frames: List[int] = field(default_factory=list)

    def add_missed(self, frame: Frame) -> None:
        self.total_groundtruth += len(frame)
        self.false_neg += len(frame)

    def add_spurious(self, frame: Frame) -> None:
        self.total_detected += len(frame)
        self.false_pos += len(frame)

    def finalize(self) -> AggregateResult:
        if self.true_pos:
            error = self.error / self.true_pos
            xoffset = self.xoffset / self.true_pos
            yoffset = self.yoffset / self.true_pos
        else:
            error = xoffset = yoffset = 0.0
        return AggregateResult(
            total_groundtruth=self.total_groundtruth,
            total_detected=self.total_detected,
            true_pos=self.true_pos,
            false_pos=self.false_pos,
            false_neg=self.false_neg,
            error=error,
            xoffset=xoffset,
            yoffset=yoffset,
            missed_frames=list(self.missed_frames),
        )


class SequenceEvaluator:
    """Walk groundtruth and detected frames in frame-id order and aggregate scores.

    Both sequences are expected in ascending frame-id order. Frames present on
    one side only count entirely as false negatives (groundtruth) or false
    positives (detected). Mean errors are 0.0 when nothing was matched.
    """

    def __init__(self, matcher: Optional[FrameMatcher] = None) -> None:
        self.matcher = matcher or FrameMatcher()

    def evaluate(
        self,
        groundtruth_frames: Sequence[Frame],
        detected_frames: Sequence[Frame],
    ) -> AggregateResult:
        totals = _Totals()
        gi = di = 0
        while gi < len(groundtruth_frames) and di < len(detected_frames):
            gt_frame = groundtruth_frames[gi]
            det_frame = detected_frames[di]
            if gt_frame.frame_id == det_frame.frame_id:
                self._score_pair(totals, gt_frame, det_frame)
                gi += 1
                di += 1
            elif gt_frame.frame_id < det_frame.frame_id:
                totals.add_missed(gt_frame)
                totals.missed_frames.append(gt_frame.frame_id)
                logger.info("false negative: %s", gt_frame.frame_id)
                gi += 1
            else:
                totals.add_spurious(det_frame)
                di += 1

        for gt_frame in groundtruth_frames[gi:]:
            totals.add_missed(gt_frame)
        for det_frame in detected_frames[di:]:
            totals.add_spurious(det_frame)

        logger.debug(
            "Evaluated %d groundtruth and %d detected frames",
            len(groundtruth_frames),
            len(detected_frames),
        )
        return totals.finalize()

    def _score_pair(self, totals: _Totals, gt_frame: Frame, det_frame: Frame) -> None:
        result = self.matcher.match(gt_frame.points, det_frame.points)
        totals.error += result.total_error
        totals.xoffset += result.last_xoffset
        totals.yoffset += result.last_yoffset

        gt_count = len(gt_frame)
        det_count = len(det_frame)
        totals.total_groundtruth += gt_count
        totals.total_detected += det_count
        totals.true_pos += min(gt_count, det_count)
        if gt_count > det_count:
            totals.false_neg += gt_count - det_count
        else:
            totals.false_pos += det_count - gt_count


def evaluate(groundtruth_frames: Sequence[Frame], detected_frames: Sequence[Frame]) -> AggregateResult:
    return SequenceEvaluator().evaluate(groundtruth_frames, detected_frames)
