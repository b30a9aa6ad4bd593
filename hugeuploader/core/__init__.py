"""Core modules for hugeuploader."""

from hugeuploader.core.events import EventEmitter
from hugeuploader.core.exceptions import (
    ConfigurationError,
    HugeUploaderError,
    InvalidURLError,
    OpenError,
    OperationError,
    ProfileNotFoundError,
    ReadError,
    TransferError,
    TransportError,
    UploadError,
    ValidationError,
)
from hugeuploader.core.logging import LogContext, log_context, setup_logging
from hugeuploader.core.output import (
    OutputFormat,
    console,
    create_progress,
    print_error,
    print_json,
    print_output,
    print_success,
    print_warning,
)
from hugeuploader.core.validation import (
    parse_field,
    parse_header,
    validate_endpoint,
    validate_file_path,
    validate_mapping,
    validate_positive_int,
    validate_positive_number,
)
from hugeuploader.core.config import CONFIG_DIR, CONFIG_FILE, Config, Profile

__all__ = [
    # Exceptions
    "HugeUploaderError",
    "ConfigurationError",
    "ProfileNotFoundError",
    "ValidationError",
    "InvalidURLError",
    "TransferError",
    "OpenError",
    "ReadError",
    "TransportError",
    "OperationError",
    "UploadError",
    # Events
    "EventEmitter",
    # Validation
    "validate_endpoint",
    "validate_file_path",
    "validate_mapping",
    "validate_positive_int",
    "validate_positive_number",
    "parse_header",
    "parse_field",
    # Config
    "Config",
    "Profile",
    "CONFIG_DIR",
    "CONFIG_FILE",
    # Output
    "OutputFormat",
    "print_output",
    "print_json",
    "print_error",
    "print_warning",
    "print_success",
    "create_progress",
    "console",
    # Logging
    "setup_logging",
    "log_context",
    "LogContext",
]
