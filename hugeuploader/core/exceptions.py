"""Exception hierarchy for hugeuploader.

Provides typed exceptions for different failure modes with clear error messages.
"""

from __future__ import annotations

from typing import Any


class HugeUploaderError(Exception):
    """Base exception for all hugeuploader errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(HugeUploaderError):
    """Error in configuration (missing, invalid, or malformed)."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ):
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = repr(value)
        super().__init__(message, details)
        self.field = field
        self.value = value


class ProfileNotFoundError(ConfigurationError):
    """Requested profile does not exist."""

    def __init__(self, profile: str):
        super().__init__(f"Profile not found: {profile}", field="profile", value=profile)
        self.profile = profile


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(HugeUploaderError, TypeError):
    """Constructor or command argument failed structural validation."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ):
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = repr(value)
        super().__init__(message, details)
        self.field = field
        self.value = value


class InvalidURLError(ValidationError):
    """Invalid endpoint URL."""

    def __init__(self, url: Any, reason: str = ""):
        msg = f"Invalid URL: {url}"
        if reason:
            msg = f"{msg} - {reason}"
        super().__init__(msg, field="endpoint", value=url)
        self.url = url
        self.reason = reason


# =============================================================================
# Transfer Errors
# =============================================================================


class TransferError(HugeUploaderError):
    """Base class for failures raised while a transfer is running."""


class OpenError(TransferError):
    """Source file could not be opened."""

    def __init__(self, path: str, reason: str = ""):
        msg = f"Cannot open {path}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg, {"file": path})
        self.path = path
        self.reason = reason


class ReadError(TransferError):
    """Reading a chunk from the source file failed."""

    def __init__(self, path: str, offset: int, reason: str = ""):
        msg = f"Failed reading {path} at offset {offset}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
        self.path = path
        self.offset = offset
        self.reason = reason


class TransportError(TransferError):
    """Network-level failure sending a chunk (DNS, TCP, TLS, timeout)."""

    def __init__(self, url: str, cause: str | None = None):
        msg = f"Transport error sending to {url}"
        if cause:
            msg = f"{msg}: {cause}"
        super().__init__(msg, {"url": url})
        self.url = url
        self.cause = cause


# =============================================================================
# Operation Errors
# =============================================================================


class OperationError(HugeUploaderError):
    """Error during an operation."""

    def __init__(
        self,
        operation: str,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        full_details = {"operation": operation}
        if details:
            full_details.update(details)
        super().__init__(message, full_details)
        self.operation = operation


class UploadError(OperationError):
    """Error during upload."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        full_details = details or {}
        if file_path:
            full_details["file"] = file_path
        super().__init__("upload", message, full_details)
        self.file_path = file_path
