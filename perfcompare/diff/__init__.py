"""Diff module for comparing measurements against a baseline."""

from perfcompare.diff.comparator import Comparator, compare_measurements, percentage_change
from perfcompare.diff.models import (
    ChangeKind,
    ComparisonResult,
    MetricComparison,
    round_to_decimal_digits,
)

__all__ = [
    "ChangeKind",
    "Comparator",
    "ComparisonResult",
    "MetricComparison",
    "compare_measurements",
    "percentage_change",
    "round_to_decimal_digits",
]
