from __future__ import annotations

"""
Logging Configuration Models.

Settings of the logging subsystem, derived from the session configuration
dict (`log_level`, `log_file`). Solver traces are emitted at DEBUG, so the
console format stays terse while the file format records the emitting
module and line.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Optional

# Severity names accepted in the configuration
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

LEVEL_NAMES: FrozenSet[str] = frozenset(_LEVEL_MAP)


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging settings for one CLI session.

    Attributes:
        level: Minimum severity; DEBUG also shows per-step solver traces.
        console: Write records to stderr.
        log_file: Rotating log file, None to disable.
        max_bytes: Size at which the log file is rotated.
        backup_count: Rotated files kept next to the log file.
        console_fmt: Terminal format.
        file_fmt: File format, with module and line of the emitting call.
        datefmt: Timestamp format of file records.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)-8s %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s:%(lineno)d | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_settings(cls, settings: Dict[str, Any], *, console: bool = True) -> LoggingConfig:
        """
        Build the logging settings from a validated session configuration.

        Args:
            settings: Configuration dict providing `log_level` and `log_file`.
            console: Whether to keep the stderr handler.

        Returns:
            LoggingConfig: Settings with an empty `log_file` mapped to None.
        """
        return cls(
            level=settings.get("log_level") or "INFO",
            console=console,
            log_file=settings.get("log_file") or None,
        )
