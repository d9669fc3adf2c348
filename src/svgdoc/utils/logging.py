"""Logging utilities for svgdoc."""

import logging
import time
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_installed_handlers: list[logging.Handler] = []


@dataclass
class RenderStats:
    """Statistics from a rendering run."""

    documents_rendered: int = 0
    elements_rendered: int = 0
    element_counts: Counter[str] = field(default_factory=Counter)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate rendering duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and an optional file.

    Args:
        log_file: Path to log file (no file handler if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output entirely

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Repeated configuration replaces the handlers installed earlier
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("svgdoc")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class RenderLogger:
    """Logger for tracking rendering progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def log_render_start(self, element_count: int, indent_step: int) -> None:
        """Log start of a document render."""
        if self._stats.start_time is None:
            self._stats.start_time = time.perf_counter()
        self._logger.debug(
            "Rendering document",
            elements=element_count,
            indent_step=indent_step,
        )

    def log_element(self, element_type: str) -> None:
        """Log a single rendered element."""
        self._stats.elements_rendered += 1
        self._stats.element_counts[element_type] += 1

    def log_render_complete(self, destination: str, duration_ms: float) -> None:
        """Log a completed document render."""
        self._stats.documents_rendered += 1
        self._stats.end_time = time.perf_counter()
        self._logger.info(
            "Document rendered",
            destination=destination,
            elements=self._stats.elements_rendered,
            duration_ms=round(duration_ms, 2),
        )

    def log_render_error(self, destination: str, error: Exception) -> None:
        """Log a failed document render."""
        self._logger.error(
            "Document rendering failed",
            destination=destination,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> RenderStats:
        """Get current rendering statistics."""
        return self._stats
