"""Parser for labeled measurements in free-form tool output.

Every measurement is expected on its own line, with the name of the
measurement left of the last colon and the value right of it::

    Instructions executed for test case A: 123456789
    Instructions executed for test case B: 2345678
    Code Size: 34567
"""

from __future__ import annotations

import re
from typing import Callable, List, Optional

from rich.console import Console

from perfcompare.measurements.models import MeasurementSet, SkippedLine, SkipReason

error_console = Console(stderr=True)

SkipHandler = Callable[[SkippedLine], None]

_NUMBER_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def print_skipped_line(skipped: SkippedLine) -> None:
    """Write the diagnostic for a skipped line to stderr."""
    error_console.file.write(f"{skipped.message}\n")


def parse_number(text: str) -> Optional[float]:
    """Parse a measurement value.

    Args:
        text: Already stripped value text

    Returns:
        The parsed float, or None if the text is not a number
    """
    if not _NUMBER_RE.fullmatch(text):
        return None
    return float(text)


class MeasurementParser:
    """Best-effort parser turning measurement output into a MeasurementSet.

    Malformed lines are reported through ``on_skip`` and otherwise ignored,
    so a parse never fails. The lines skipped by the most recent call to
    ``parse`` are kept in ``skipped``.
    """

    def __init__(self, on_skip: Optional[SkipHandler] = print_skipped_line) -> None:
        """Initialize parser.

        Args:
            on_skip: Called once per malformed line; None silences diagnostics
        """
        self.on_skip = on_skip
        self.skipped: List[SkippedLine] = []

    def parse(self, text: str) -> MeasurementSet:
        """Extract measurements from text.

        Args:
            text: Raw measurement output, one measurement per line

        Returns:
            Mapping from measurement name to value (last duplicate wins)
        """
        self.skipped = []
        measurements: MeasurementSet = {}

        for line in text.split("\n"):
            if not line:
                continue

            before, colon, after = line.rpartition(":")
            if not colon:
                self._skip(line, SkipReason.MISSING_COLON)
                continue

            value = parse_number(after.strip())
            if value is None:
                self._skip(line, SkipReason.INVALID_VALUE)
                continue

            measurements[before.strip()] = value

        return measurements

    def _skip(self, line: str, reason: SkipReason) -> None:
        skipped = SkippedLine(line=line, reason=reason)
        self.skipped.append(skipped)
        if self.on_skip is not None:
            self.on_skip(skipped)


def extract_measurements(
    text: str, on_skip: Optional[SkipHandler] = print_skipped_line
) -> MeasurementSet:
    """Parse measurement text, reporting malformed lines to stderr by default."""
    return MeasurementParser(on_skip=on_skip).parse(text)
