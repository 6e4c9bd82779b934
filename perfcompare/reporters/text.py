"""Plain text reporter."""

from __future__ import annotations

from perfcompare.diff.models import ComparisonResult
from perfcompare.reporters.base import Reporter
from perfcompare.reporters.registry import register_reporter


@register_reporter("text")
class TextReporter(Reporter):
    """One line per baseline measurement, as produced by the comparator."""

    def emit(self, result: ComparisonResult) -> str:
        return result.report
