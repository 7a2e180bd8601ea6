"""Command line entry point: score detected fingertips against groundtruth."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from fingertip_eval.adapters.report_writer import render_report
from fingertip_eval.adapters.table_reader import FrameTableReader, TableFormatError
from fingertip_eval.app.settings import EvalSettings, load_settings
from fingertip_eval.core.evaluator import SequenceEvaluator
from fingertip_eval.core.point_decoder import DETECTED_DIM, GROUNDTRUTH_DIM

LOGGER = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fingertip-eval",
        usage="%(prog)s groundtruth_file detected_file",
        description="Evaluate fingertip detection results against groundtruth labels.",
    )
    parser.add_argument("groundtruth_file", type=Path, help="Groundtruth table (frame_id x y ...)")
    parser.add_argument("detected_file", type=Path, help="Detected table (frame_id x y z ...)")
    parser.add_argument("--log-format", choices=["text", "json"], default=None, help="Logging format")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (default: INFO)")
    return parser


def setup_logging(settings: EvalSettings) -> None:
    log_level = getattr(logging, settings.log_level, logging.INFO)
    if settings.log_format == "json":
        formatter = logging.Formatter('{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}')
    else:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    logging.basicConfig(level=log_level, handlers=[handler])


def resolve_settings(args: argparse.Namespace) -> EvalSettings:
    overrides = {}
    if args.log_format:
        overrides["log_format"] = args.log_format
    if args.log_level:
        overrides["log_level"] = args.log_level
    return load_settings(**overrides)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    settings = resolve_settings(args)
    setup_logging(settings)

    try:
        groundtruth = FrameTableReader(args.groundtruth_file, GROUNDTRUTH_DIM).read_frames()
        detected = FrameTableReader(args.detected_file, DETECTED_DIM).read_frames()
    except (OSError, TableFormatError) as exc:
        LOGGER.error("Unable to read input tables: %s", exc)
        parser.exit(1)

    result = SequenceEvaluator().evaluate(groundtruth, detected)
    sys.stdout.write(render_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
