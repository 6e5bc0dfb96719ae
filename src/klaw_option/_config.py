"""Library configuration: OptionConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_option._logging import configure_logging

__all__ = [
    'OptionConfig',
    'get_config',
    'init',
]

_DEFAULT_CONCURRENCY = 16
_MAX_CONCURRENCY = 1024


@dataclass(frozen=True)
class OptionConfig:
    """Configuration for klaw-option.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Emit JSON logs when logging is configured; console output otherwise.
        concurrency: Default concurrency limit for async_sequence. 0 = unbounded.
    """

    log_level: str | None = None
    json_logs: bool = True
    concurrency: int = _DEFAULT_CONCURRENCY


# Global configuration (set by init())
_config: OptionConfig | None = None


def _clamp_concurrency(value: int) -> int:
    if value <= 0:
        return 0
    return min(_MAX_CONCURRENCY, value)


def _detect_concurrency() -> int:
    """Read KLAW_OPTION_CONCURRENCY, falling back to the default."""
    raw = os.environ.get('KLAW_OPTION_CONCURRENCY', '').strip()
    if not raw:
        return _DEFAULT_CONCURRENCY
    try:
        return _clamp_concurrency(int(raw))
    except ValueError:
        logging.warning(
            "Invalid KLAW_OPTION_CONCURRENCY value '%s', defaulting to %d",
            raw,
            _DEFAULT_CONCURRENCY,
        )
        return _DEFAULT_CONCURRENCY


def _detect_log_level() -> str | None:
    """Read KLAW_OPTION_LOG_LEVEL; empty means unset."""
    return os.environ.get('KLAW_OPTION_LOG_LEVEL', '').strip().upper() or None


def init(
    log_level: str | None = None,
    *,
    json_logs: bool = True,
    concurrency: int | None = None,
) -> OptionConfig:
    """Initialize klaw-option with the given configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            KLAW_OPTION_LOG_LEVEL if None; logging is left untouched when
            neither is set.
        json_logs: Emit JSON logs (True) or console logs (False).
        concurrency: Default async_sequence limit. Read from
            KLAW_OPTION_CONCURRENCY if None. 0 means unbounded.

    Returns:
        The OptionConfig that was set.

    Raises:
        ValueError: If log_level is not a known logging level.

    Example:
        ```python
        from klaw_option import init

        init(log_level='DEBUG', concurrency=8)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()
    resolved_concurrency = (
        _detect_concurrency() if concurrency is None else _clamp_concurrency(concurrency)
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=json_logs)

    _config = OptionConfig(
        log_level=resolved_level,
        json_logs=json_logs,
        concurrency=resolved_concurrency,
    )
    return _config


def get_config() -> OptionConfig:
    """Get the current configuration.

    Before init() is called, returns a configuration built from the
    environment without touching logging.
    """
    if _config is None:
        return OptionConfig(log_level=_detect_log_level(), concurrency=_detect_concurrency())
    return _config


def reset() -> None:
    """Forget the configuration set by init()."""
    global _config  # noqa: PLW0603
    _config = None
