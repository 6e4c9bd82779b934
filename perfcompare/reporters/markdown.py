"""Markdown reporter for PR comments."""

from __future__ import annotations

from perfcompare.diff.models import ChangeKind, ComparisonResult, MetricComparison
from perfcompare.reporters.base import Reporter
from perfcompare.reporters.registry import register_reporter

_STATUS_LABELS = {
    ChangeKind.IMPROVED: "🎉 improved",
    ChangeKind.REGRESSED: "⚠️ regressed",
    ChangeKind.UNCHANGED: "➡️ unchanged",
    ChangeKind.MISSING: "🛑 missing",
}


@register_reporter("markdown")
class MarkdownReporter(Reporter):
    """Markdown table with one row per baseline measurement."""

    def emit(self, result: ComparisonResult) -> str:
        lines = [
            f"# {self.title}",
            "",
            f"Sensitivity: {result.sensitivity_percentage}%",
            "",
        ]

        if result.comparisons:
            lines.append("| Measurement | Status | Change | Baseline | After changes |")
            lines.append("|-------------|--------|--------|----------|---------------|")
            for c in result.comparisons:
                lines.append(self._format_row(c))
            lines.append("")
        else:
            lines.append("*No baseline measurements found.*")
            lines.append("")

        lines.append(
            f"**Regressed**: {len(result.regressions)} · "
            f"**Improved**: {len(result.improvements)} · "
            f"**Missing**: {len(result.missing)}"
        )
        status = (
            "✗ SIGNIFICANT CHANGE" if result.has_significant_change else "✓ NO SIGNIFICANT CHANGE"
        )
        lines.append(f"**Status**: {status}")

        return "\n".join(lines)

    def _format_row(self, c: MetricComparison) -> str:
        name = c.name.replace("|", "\\|")
        if c.kind == ChangeKind.MISSING:
            return f"| {name} | {_STATUS_LABELS[c.kind]} | - | {c.baseline_value} | - |"

        change = f"{c.display_percentage}%"
        if c.kind == ChangeKind.IMPROVED:
            change = f"-{change}"
        return (
            f"| {name} | {_STATUS_LABELS[c.kind]} | {change} | "
            f"{c.baseline_value} | {c.current_value} |"
        )
