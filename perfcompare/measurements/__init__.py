"""Measurements module - parsing labeled numeric measurements."""

from perfcompare.measurements.models import MeasurementSet, SkippedLine, SkipReason
from perfcompare.measurements.parser import (
    MeasurementParser,
    extract_measurements,
    parse_number,
)

__all__ = [
    "MeasurementParser",
    "MeasurementSet",
    "SkipReason",
    "SkippedLine",
    "extract_measurements",
    "parse_number",
]
