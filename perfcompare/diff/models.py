"""Models for comparing a candidate run against a baseline."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


def round_to_decimal_digits(value: float, digits: int = 3) -> float:
    """Round half away from zero to the given number of decimal digits.

    Non-finite values, and values too large to scale, are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    scale = 10.0**digits
    scaled = value * scale
    if not math.isfinite(scaled):
        return value
    magnitude = abs(scaled)
    rounded = math.floor(magnitude)
    if magnitude - rounded >= 0.5:
        rounded += 1
    return math.copysign(rounded, scaled) / scale


class ChangeKind(Enum):
    """Classification of a single measurement."""

    MISSING = "missing"
    IMPROVED = "improved"
    REGRESSED = "regressed"
    UNCHANGED = "unchanged"


@dataclass
class MetricComparison:
    """Outcome of comparing one measurement.

    Attributes:
        name: Measurement name
        kind: How the measurement changed
        baseline_value: Value in the baseline run
        current_value: Value after changes (None if missing)
        difference_percentage: Relative change in percent (None if missing)
    """

    name: str
    kind: ChangeKind
    baseline_value: float
    current_value: float | None = None
    difference_percentage: float | None = None

    @property
    def is_significant(self) -> bool:
        """Whether the change exceeded the sensitivity threshold."""
        return self.kind in (ChangeKind.IMPROVED, ChangeKind.REGRESSED)

    @property
    def display_percentage(self) -> float | None:
        """Difference rounded for display; improvements are shown as magnitude."""
        if self.difference_percentage is None:
            return None
        if self.kind == ChangeKind.IMPROVED:
            return -round_to_decimal_digits(self.difference_percentage)
        return round_to_decimal_digits(self.difference_percentage)

    @property
    def report_line(self) -> str:
        """Single line describing this measurement."""
        if self.kind == ChangeKind.MISSING:
            return f"🛑 {self.name} not present after changes"

        raw = f"(baseline: {self.baseline_value}, after changes: {self.current_value})"
        if self.kind == ChangeKind.IMPROVED:
            return f"🎉 {self.name} improved by {self.display_percentage}% {raw}"
        if self.kind == ChangeKind.REGRESSED:
            return f"⚠️ {self.name} regressed by {self.display_percentage}% {raw}"
        return (
            f"➡️ {self.name} did not change significantly with "
            f"{self.display_percentage}% {raw}"
        )


@dataclass
class ComparisonResult:
    """Complete comparison of a candidate run against a baseline.

    Attributes:
        sensitivity_percentage: Threshold above which a change is significant
        comparisons: Per-measurement outcomes, sorted by name
    """

    sensitivity_percentage: float
    comparisons: list[MetricComparison] = field(default_factory=list)

    @property
    def report(self) -> str:
        """Plain text report, one line per baseline measurement."""
        return "".join(f"{c.report_line}\n" for c in self.comparisons)

    @property
    def has_significant_change(self) -> bool:
        """Check if any measurement improved or regressed beyond the threshold."""
        return any(c.is_significant for c in self.comparisons)

    @property
    def regressions(self) -> list[MetricComparison]:
        """Measurements that regressed beyond the threshold."""
        return [c for c in self.comparisons if c.kind == ChangeKind.REGRESSED]

    @property
    def improvements(self) -> list[MetricComparison]:
        """Measurements that improved beyond the threshold."""
        return [c for c in self.comparisons if c.kind == ChangeKind.IMPROVED]

    @property
    def unchanged(self) -> list[MetricComparison]:
        return [c for c in self.comparisons if c.kind == ChangeKind.UNCHANGED]

    @property
    def missing(self) -> list[MetricComparison]:
        """Baseline measurements absent after changes."""
        return [c for c in self.comparisons if c.kind == ChangeKind.MISSING]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "sensitivity_percentage": self.sensitivity_percentage,
            "has_significant_change": self.has_significant_change,
            "summary": {
                "regressed": len(self.regressions),
                "improved": len(self.improvements),
                "unchanged": len(self.unchanged),
                "missing": len(self.missing),
            },
            "measurements": [
                {
                    "name": c.name,
                    "status": c.kind.value,
                    "difference_percentage": c.difference_percentage,
                    "baseline": c.baseline_value,
                    "after_changes": c.current_value,
                }
                for c in self.comparisons
            ],
        }
