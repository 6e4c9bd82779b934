"""Base class for comparison reporters."""

from __future__ import annotations

from abc import ABC, abstractmethod

from perfcompare.diff.models import ComparisonResult


class Reporter(ABC):
    """Renders a ComparisonResult in a particular output format."""

    def __init__(self, title: str = "Performance Comparison") -> None:
        self.title = title

    @abstractmethod
    def emit(self, result: ComparisonResult) -> str:
        """Render the comparison result.

        Args:
            result: Comparison to render

        Returns:
            Report text
        """
