"""Extraction of consecutive matching lines from a file or text stream."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Callable, TextIO


class LinesError(ValueError):
    """Raised when the input holds too few lines."""


@dataclass
class Lines:
    """Read lines before ``line_num`` that satisfy ``condition``.

    ``parser`` turns a matching line into ``(text, capture)``; the text is kept
    only when ``capture`` is true. A ``line_num`` of -1 scans from the start of
    the input and stops at the first line that does not match.
    """

    condition: Callable[[str], bool]
    parser: Callable[[str], "tuple[str, bool]"]
    file_name: str = ""
    line_num: int = -1

    def extract(self) -> list[str]:
        """Extract lines from ``file_name``."""
        with open(self.file_name, encoding="utf-8", newline="\n") as stream:
            return self.extract_from(stream)

    def extract_from(self, stream: TextIO) -> list[str]:
        """Extract lines from an open text stream."""
        lines: list[str] = []
        scan_all = self.line_num == -1
        for lnum in itertools.count():
            if not scan_all and lnum >= self.line_num - 1:
                break
            line = stream.readline()
            if line == "":
                if lnum == 0:
                    raise LinesError("no lines in file")
                if lnum == 1:
                    raise LinesError("only 1 line")
                if not scan_all:
                    raise LinesError(f"only {lnum} lines")
                break
            if self.condition(line):
                extracted, capture = self.parser(line)
                if capture:
                    lines.append(extracted)
            elif scan_all:
                break
            else:
                lines = []
        return lines