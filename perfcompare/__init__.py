"""perfcompare - Compare performance measurements between two runs."""

__version__ = "0.1.0"
