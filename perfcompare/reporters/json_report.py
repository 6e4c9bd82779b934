"""JSON reporter."""

from __future__ import annotations

import json
import math
from typing import Any

from perfcompare.diff.models import ComparisonResult
from perfcompare.reporters.base import Reporter
from perfcompare.reporters.registry import register_reporter


def _finite_or_none(value: float | None) -> float | None:
    if value is None or not math.isfinite(value):
        return None
    return value


@register_reporter("json")
class JSONReporter(Reporter):
    """Machine-readable comparison report.

    Non-finite numbers (from a zero baseline or sensitivity) are written as null so the
    output stays valid JSON.
    """

    def emit(self, result: ComparisonResult) -> str:
        data = self._build_report(result)
        return json.dumps(data, indent=2, ensure_ascii=False)

    def _build_report(self, result: ComparisonResult) -> dict[str, Any]:
        report = result.to_dict()
        report["sensitivity_percentage"] = _finite_or_none(report["sensitivity_percentage"])
        for measurement in report["measurements"]:
            for key in ("difference_percentage", "baseline", "after_changes"):
                measurement[key] = _finite_or_none(measurement[key])
        return report
