"""Reporters module - output formatting for comparison results."""

from perfcompare.reporters.base import Reporter
from perfcompare.reporters.registry import (
    available_reporters,
    get_reporter,
    register_reporter,
)

# Register built-in reporters
from perfcompare.reporters import json_report, markdown, text  # noqa: E402,F401

__all__ = [
    "Reporter",
    "available_reporters",
    "get_reporter",
    "register_reporter",
]
