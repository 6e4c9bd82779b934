"""Comparator for measurements before and after a change."""

from __future__ import annotations

import math
from typing import Optional

from perfcompare.diff.models import ChangeKind, ComparisonResult, MetricComparison
from perfcompare.measurements.models import MeasurementSet
from perfcompare.measurements.parser import (
    SkipHandler,
    extract_measurements,
    print_skipped_line,
)


def percentage_change(baseline: float, current: float) -> float:
    """Relative change from baseline to current, in percent.

    A zero baseline follows IEEE-754 division: +/-inf for a non-zero
    difference, nan otherwise.
    """
    difference = current - baseline
    try:
        ratio = difference / baseline
    except ZeroDivisionError:
        if difference == 0 or math.isnan(difference):
            ratio = math.nan
        else:
            ratio = math.copysign(math.inf, difference) * math.copysign(1.0, baseline)
    return ratio * 100


class Comparator:
    """Compares measurements after changes against a baseline.

    Only baseline measurements are reported; measurements that appear only
    after changes are ignored. A measurement is classified as:
    - IMPROVED: decreased by more than the sensitivity
    - REGRESSED: increased by more than the sensitivity
    - UNCHANGED: within the sensitivity (or not comparable, e.g. nan)
    - MISSING: not present after changes
    """

    def __init__(
        self,
        baseline: MeasurementSet,
        current: MeasurementSet,
        sensitivity_percentage: float,
    ) -> None:
        """Initialize comparator.

        Args:
            baseline: Measurements before the change
            current: Measurements after the change
            sensitivity_percentage: Percentage after which a change is significant
        """
        self.baseline = baseline
        self.current = current
        self.sensitivity_percentage = sensitivity_percentage

    def compare(self) -> ComparisonResult:
        """Compare current measurements against the baseline.

        Returns:
            ComparisonResult with one entry per baseline measurement
        """
        comparisons = [
            self._compare_measurement(name, baseline_value)
            for name, baseline_value in sorted(self.baseline.items())
        ]
        return ComparisonResult(
            sensitivity_percentage=self.sensitivity_percentage,
            comparisons=comparisons,
        )

    def _compare_measurement(self, name: str, baseline_value: float) -> MetricComparison:
        if name not in self.current:
            return MetricComparison(
                name=name, kind=ChangeKind.MISSING, baseline_value=baseline_value
            )

        current_value = self.current[name]
        difference = percentage_change(baseline_value, current_value)

        return MetricComparison(
            name=name,
            kind=self._get_change_kind(difference),
            baseline_value=baseline_value,
            current_value=current_value,
            difference_percentage=difference,
        )

    def _get_change_kind(self, difference: float) -> ChangeKind:
        if difference < -self.sensitivity_percentage:
            return ChangeKind.IMPROVED
        elif difference > self.sensitivity_percentage:
            return ChangeKind.REGRESSED
        else:
            return ChangeKind.UNCHANGED


def compare_measurements(
    baseline_output: str,
    current_output: str,
    sensitivity_percentage: float,
    on_skip: Optional[SkipHandler] = print_skipped_line,
) -> ComparisonResult:
    """Parse two measurement outputs and compare them.

    Args:
        baseline_output: Measurement text before the change
        current_output: Measurement text after the change
        sensitivity_percentage: Percentage after which a change is significant
        on_skip: Handler for malformed lines (None to silence)

    Returns:
        ComparisonResult for the baseline measurements
    """
    baseline = extract_measurements(baseline_output, on_skip=on_skip)
    current = extract_measurements(current_output, on_skip=on_skip)
    return Comparator(baseline, current, sensitivity_percentage).compare()
