"""Shared fixtures for perfcompare tests."""

import pytest


@pytest.fixture
def baseline_output():
    """Baseline measurement output."""
    return (
        "Instructions executed for test case A: 123456789\n"
        "Instructions executed for test case B: 2345678\n"
        "Code Size: 34567\n"
    )


@pytest.fixture
def collected_skips():
    """List to pass as `on_skip=collected_skips.append`."""
    skipped = []
    return skipped


@pytest.fixture
def measurement_files(tmp_path):
    """Write baseline and changed measurement files, returning their paths."""
    baseline = tmp_path / "baseline.txt"
    changed = tmp_path / "changed.txt"
    baseline.write_text("A: 100\nB: 50\n")
    changed.write_text("A: 105\nB: 50\n")
    return baseline, changed
