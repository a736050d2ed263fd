"""Destinations for rendered report lines."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

_logger = logging.getLogger(__name__)


@dataclass
class ReportOutput:
    """Writes report lines to a stream, or to a file once one is selected."""

    stream: TextIO = field(default_factory=lambda: sys.stdout)
    path: Path | None = None
    _truncated: set[Path] = field(default_factory=set)

    def redirect(self, path: str | Path) -> None:
        """Send later output to ``path``, truncating it the first time."""
        resolved = Path(path)
        if resolved not in self._truncated:
            resolved.write_text("", encoding="utf-8")
            self._truncated.add(resolved)
        self.path = resolved
        _logger.debug("Report output redirected to %s", resolved)

    def write_lines(self, lines: list[str]) -> None:
        """Write lines, each terminated by a newline."""
        text = "".join(f"{line}\n" for line in lines)
        if self.path is None:
            self.stream.write(text)
            return
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(text)
