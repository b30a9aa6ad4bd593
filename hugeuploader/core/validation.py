"""Input validation for uploader arguments and CLI options.

Every validator returns the normalized value or raises ``ValidationError``.
"""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from numbers import Real
from typing import Any
from urllib.parse import urlparse

from hugeuploader.core.exceptions import InvalidURLError, ValidationError

ALLOWED_SCHEMES = ("http", "https")


def validate_endpoint(url: Any) -> str:
    """Validate the upload endpoint URL.

    Args:
        url: Endpoint URL.

    Returns:
        The URL with surrounding whitespace removed.

    Raises:
        InvalidURLError: If the URL is empty, not a string, or not http(s).
    """
    if not isinstance(url, str) or not url.strip():
        raise InvalidURLError(url, "endpoint must be defined")

    url = url.strip()
    parsed = urlparse(url)
    if parsed.scheme not in ALLOWED_SCHEMES:
        raise InvalidURLError(url, "scheme must be http or https")
    if not parsed.netloc:
        raise InvalidURLError(url, "missing host")
    return url


def validate_file_path(path: Any) -> str:
    """Validate the source file path is text (or path-like).

    Existence is not checked here; opening the file is the first step of
    a run and reports a missing file as a transfer error.
    """
    if isinstance(path, os.PathLike):
        path = os.fspath(path)
    if not isinstance(path, str) or not path:
        raise ValidationError("file must be a string", field="file", value=path)
    return path


def validate_mapping(value: Any, field: str) -> dict[str, Any]:
    """Validate an optional key-value mapping.

    Args:
        value: Mapping or None.
        field: Argument name for error messages.

    Returns:
        A shallow copy of the mapping, or an empty dict for None.
    """
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValidationError(f"{field} must be null or a mapping", field=field, value=value)
    return dict(value)


def validate_positive_number(value: Any, field: str) -> float | int:
    """Validate a strictly positive, finite int or float (bools rejected)."""
    if (
        isinstance(value, bool)
        or not isinstance(value, Real)
        or (isinstance(value, float) and not math.isfinite(value))
        or value <= 0
    ):
        raise ValidationError(f"{field} must be a positive number", field=field, value=value)
    return value


def validate_positive_int(value: Any, field: str) -> int:
    """Validate a strictly positive integer (bools rejected)."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f"{field} must be a positive integer", field=field, value=value)
    return value


def parse_header(raw: str) -> tuple[str, str]:
    """Parse a ``Name: value`` header option.

    Raises:
        ValidationError: If the colon separator or name is missing.
    """
    name, sep, value = raw.partition(":")
    if not sep or not name.strip():
        raise ValidationError("Header must look like 'Name: value'", field="header", value=raw)
    return name.strip(), value.strip()


def parse_field(raw: str) -> tuple[str, str]:
    """Parse a ``key=value`` form field option."""
    key, sep, value = raw.partition("=")
    if not sep or not key.strip():
        raise ValidationError("Field must look like 'key=value'", field="field", value=raw)
    return key.strip(), value
