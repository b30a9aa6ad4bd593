"""Logging utilities for hugeuploader.

Provides logger setup and a timed context that reports a run's outcome.
"""

from __future__ import annotations

import logging
import sys
import time
from contextlib import contextmanager
from typing import Any, Generator, Optional

# =============================================================================
# Constants
# =============================================================================

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# =============================================================================
# Logger Setup
# =============================================================================


def setup_logging(
    level: int = logging.WARNING,
    *,
    quiet: bool = False,
    verbose: bool = False,
) -> None:
    """Configure logging for hugeuploader.

    Retry and failure warnings show by default; ``verbose`` adds the
    uploader's per-chunk diagnostics.

    Args:
        level: Base logging level.
        quiet: If True, only show errors.
        verbose: If True, show uploader diagnostics and debug messages.
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
    )

    # Suppress noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


# =============================================================================
# Log Context
# =============================================================================


class LogContext:
    """Time an operation and log its start and end with context fields.

    Fields added with ``update`` while the block runs (file id, chunk
    counts, outcome) appear on the closing line.
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        **context: Any,
    ):
        self.operation = operation
        self.logger = logger or logging.getLogger(__name__)
        self.context = context
        self.started_at: Optional[float] = None

    @property
    def elapsed(self) -> float:
        return time.monotonic() - self.started_at if self.started_at is not None else 0.0

    def update(self, **context: Any) -> None:
        """Add or replace fields reported when the block exits."""
        self.context.update(context)

    def _context_str(self) -> str:
        return ", ".join(f"{k}={v}" for k, v in self.context.items())

    def __enter__(self) -> "LogContext":
        self.started_at = time.monotonic()
        self.logger.info("Starting %s (%s)", self.operation, self._context_str())
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if exc_type:
            self.logger.error(
                "%s failed after %.2fs: %s (%s)",
                self.operation,
                self.elapsed,
                exc_val,
                self._context_str(),
            )
        else:
            self.logger.info(
                "%s finished in %.2fs (%s)", self.operation, self.elapsed, self._context_str()
            )


@contextmanager
def log_context(
    operation: str,
    logger: Optional[logging.Logger] = None,
    **context: Any,
) -> Generator[LogContext, None, None]:
    """Context manager for structured logging.

    Args:
        operation: Name of the operation.
        logger: Logger instance.
        **context: Additional context fields.

    Yields:
        LogContext instance.
    """
    ctx = LogContext(operation, logger, **context)
    with ctx:
        yield ctx
