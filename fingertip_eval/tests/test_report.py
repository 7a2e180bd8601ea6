from fingertip_eval.adapters.report_writer import render_report
from fingertip_eval.core.models import AggregateResult


def build_result() -> AggregateResult:
    return AggregateResult(
        total_groundtruth=4,
        total_detected=5,
        true_pos=3,
        false_pos=2,
        false_neg=1,
        error=2.5,
        xoffset=1.0,
        yoffset=0.5,
        missed_frames=[7],
    )


def test_render_report_lists_labelled_lines() -> None:
    lines = render_report(build_result()).splitlines()

    assert lines == [
        "total fingertips in groundtruth: 4",
        "total fingertips in detected: 5",
        "true positives: 3",
        "error for true positives: 2.5",
        "xoffset for true positives: 1.0",
        "yoffset for true positives: 0.5",
        "false positives: 2",
        "false negatives: 1",
    ]
