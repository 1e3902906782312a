"""
Process-side logging.

stdout carries the protocol, so everything here goes to stderr. Messages
meant for the editor use ``WordLanguageServer.log`` instead.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "WORDLS_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class PlainFormatter(logging.Formatter):
    """Formats records as ``[L YYYY-MM-DD HH:MM:SS.mmm module] message``."""

    def format(self, record: logging.LogRecord) -> str:
        ct = self.converter(record.created)
        timestamp = (
            f"{ct.tm_year:04d}-{ct.tm_mon:02d}-{ct.tm_mday:02d} "
            f"{ct.tm_hour:02d}:{ct.tm_min:02d}:{ct.tm_sec:02d}.{int(record.msecs):03d}"
        )

        module_name = record.name
        if module_name.startswith("wordls."):
            module_name = module_name[len("wordls."):]

        message = f"[{record.levelname[0]} {timestamp} {module_name}] {record.getMessage()}"
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        return message


def resolve_level(name: str | None = None) -> int:
    """Level from an explicit name, else the environment, else INFO."""
    name = (name or os.getenv(LOG_LEVEL_ENV) or "INFO").upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {name}")
    return getattr(logging, name)


def setup_logging(level: int = logging.INFO) -> None:
    """Send wordls and pygls logs to stderr."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(PlainFormatter())
    root_logger.addHandler(handler)
