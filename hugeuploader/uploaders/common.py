"""Common helpers for the uploader modules."""

from __future__ import annotations

import random
import time

from hugeuploader.uploaders.constants import RETRYABLE_STATUS_CODES, SUCCESS_STATUS_CODES


def is_success_status(status_code: int) -> bool:
    """Check if the server accepted a chunk (200, 201, 204)."""
    return status_code in SUCCESS_STATUS_CODES


def is_retryable_status(status_code: int) -> bool:
    """Check if an HTTP status code warrants resending the chunk.

    Retryable: 408 (request timeout), 502/503/504 (gateway/availability).
    Everything else that is not a success is permanent.
    """
    return status_code in RETRYABLE_STATUS_CODES


def make_file_id(file_size: int) -> str:
    """Generate a file id from the file size, wall-clock ms and a random value."""
    return str(random.randrange(100_000_000) + int(time.time() * 1000) + file_size)
