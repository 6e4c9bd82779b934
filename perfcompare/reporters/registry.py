"""Registry mapping format names to reporter classes."""

from __future__ import annotations

from typing import Callable, Dict, Type

from perfcompare.exceptions import ReporterError
from perfcompare.reporters.base import Reporter

_REPORTERS: Dict[str, Type[Reporter]] = {}


def register_reporter(name: str) -> Callable[[Type[Reporter]], Type[Reporter]]:
    """Class decorator registering a reporter under a format name."""

    def decorator(cls: Type[Reporter]) -> Type[Reporter]:
        _REPORTERS[name] = cls
        return cls

    return decorator


def available_reporters() -> list[str]:
    return sorted(_REPORTERS)


def get_reporter(name: str, **kwargs) -> Reporter:
    """Instantiate the reporter registered under name.

    Raises:
        ReporterError: If no reporter is registered for name
    """
    try:
        reporter_cls = _REPORTERS[name]
    except KeyError:
        raise ReporterError(
            f"Unknown report format '{name}'. "
            f"Available: {', '.join(available_reporters())}"
        ) from None
    return reporter_cls(**kwargs)
