import logging
from pathlib import Path
from typing import List

from fingertip_eval.core.models import Frame, Row
from fingertip_eval.core.point_decoder import frame_from_row

logger = logging.getLogger(__name__)


class TableFormatError(ValueError):
    """Raised when a table line holds something other than integers."""

    def __init__(self, path: Path, line_number: int, line: str) -> None:
        super().__init__(f"{path}:{line_number}: expected whitespace-separated integers, got {line!r}")
        self.path = path
        self.line_number = line_number
        self.line = line


class FrameTableReader:
    """Load frame rows from a whitespace-separated text table.

    The first line is a header and is ignored. Every other non-blank line is
    ``frame_id c1 c2 ... cn``.
    """

    def __init__(self, source_path: Path, dim: int) -> None:
        self.source_path = Path(source_path)
        self.dim = dim

    def read_rows(self) -> List[Row]:
        # header bytes are never decoded
        raw_lines = self.source_path.read_bytes().splitlines()
        rows: List[Row] = []
        for line_number, raw_line in enumerate(raw_lines[1:], start=2):
            try:
                line = raw_line.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise TableFormatError(
                    self.source_path, line_number, raw_line.decode("utf-8", errors="replace")
                ) from exc
            tokens = line.split()
            if not tokens:
                continue
            try:
                rows.append([int(token) for token in tokens])
            except ValueError as exc:
                raise TableFormatError(self.source_path, line_number, line) from exc
        logger.debug("Read %d rows from %s", len(rows), self.source_path)
        return rows

    def read_frames(self) -> List[Frame]:
        return [frame_from_row(row, self.dim) for row in self.read_rows()]
