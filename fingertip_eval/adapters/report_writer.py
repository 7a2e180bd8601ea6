from fingertip_eval.core.models import AggregateResult


def render_report(result: AggregateResult) -> str:
    lines = [
        f"total fingertips in groundtruth: {result.total_groundtruth}",
        f"total fingertips in detected: {result.total_detected}",
        f"true positives: {result.true_pos}",
        f"error for true positives: {result.error}",
        f"xoffset for true positives: {result.xoffset}",
        f"yoffset for true positives: {result.yoffset}",
        f"false positives: {result.false_pos}",
        f"false negatives: {result.false_neg}",
    ]
    return "\n".join(lines) + "\n"
