"""Logging utilities for cursivekern."""

import logging
import sys
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import structlog


@dataclass
class SpacingStats:
    """Statistics from a spacing run."""

    pairs_measured: int = 0
    pairs_kerned: int = 0
    pairs_skipped: int = 0
    clamped_count: int = 0
    unconverged_count: int = 0
    collisions: int = 0
    skipped: list[tuple[str, str]] = field(default_factory=list)

    @property
    def converged_count(self) -> int:
        """Kerned pairs that reached the target distance."""
        return self.pairs_kerned - self.clamped_count - self.unconverged_count


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (auto-generated if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    if log_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = Path(f"cursivekern_{timestamp}.log")

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(getattr(logging, file_level.upper()))
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

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

    logger = structlog.get_logger("cursivekern")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


def configure_console_logging(console_level: str = "WARNING") -> None:
    """Configure structured logging to stderr only, without a log file.

    Args:
        console_level: Minimum level that reaches the console
    """
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, console_level.upper())
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


class SpacingLogger:
    """Logger for tracking spacing decisions and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("cursivekern")
        self._stats = SpacingStats()

    def log_distance(self, left: str, right: str, distance: float | None) -> None:
        """Log a distance measurement."""
        self._logger.debug(
            "Distance measured",
            left=left,
            right=right,
            distance=None if distance is None else round(distance, 2),
        )
        self._stats.pairs_measured += 1

    def log_kern(
        self,
        left: str,
        right: str,
        kern: float,
        iterations: int,
        converged: bool,
        clamped: bool,
    ) -> None:
        """Log a kerning solve."""
        self._logger.info(
            "Pair kerned",
            left=left,
            right=right,
            kern=round(kern, 2),
            iterations=iterations,
            converged=converged,
            clamped=clamped,
        )
        self._stats.pairs_kerned += 1
        if clamped:
            self._stats.clamped_count += 1
        elif not converged:
            self._stats.unconverged_count += 1

    def log_pair_skipped(self, left: str, right: str, reason: str) -> None:
        """Log a pair left unkerned."""
        self._logger.debug("Pair skipped", left=left, right=right, reason=reason)
        self._stats.pairs_skipped += 1
        self._stats.skipped.append((f"{left}/{right}", reason))

    def log_collision(self, left: str, right: str) -> None:
        """Log a detected collision."""
        self._logger.info("Collision detected", left=left, right=right)
        self._stats.collisions += 1

    @property
    def stats(self) -> SpacingStats:
        """Get current spacing statistics."""
        return self._stats
