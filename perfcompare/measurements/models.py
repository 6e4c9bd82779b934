"""Models for parsed performance measurements."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict

MeasurementSet = Dict[str, float]


class SkipReason(Enum):
    """Why a measurement line was ignored."""

    MISSING_COLON = "missing_colon"
    INVALID_VALUE = "invalid_value"


@dataclass(frozen=True)
class SkippedLine:
    """A measurement line that could not be parsed.

    Attributes:
        line: The raw line as it appeared in the input
        reason: Why the line was ignored
    """

    line: str
    reason: SkipReason

    @property
    def message(self) -> str:
        """Diagnostic text describing the skipped line."""
        if self.reason == SkipReason.MISSING_COLON:
            return (
                "Ignoring following measurement line because it doesn't "
                f"contain a colon: {self.line}"
            )
        return (
            "Ignoring following measurement line because the value can't be "
            f"parsed as a number: {self.line}"
        )
