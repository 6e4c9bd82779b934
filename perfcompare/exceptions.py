"""Custom exceptions for perfcompare."""


class PerfCompareError(Exception):
    """Base exception for perfcompare."""

    pass


class MeasurementInputError(PerfCompareError):
    """Measurement input could not be read."""

    pass


class ConfigError(PerfCompareError):
    """Error loading or validating configuration."""

    pass


class ConfigNotFoundError(ConfigError):
    """Configuration file not found."""

    pass


class ConfigValidationError(ConfigError):
    """Configuration file is invalid."""

    pass


class ReporterError(PerfCompareError):
    """Unknown or misconfigured reporter."""

    pass


class ReportOutputError(PerfCompareError):
    """Report could not be written."""

    pass
