"""hugeuploader - Upload huge files in sequential, retried HTTP chunks.

The file is split into fixed-size chunks, each POSTed as multipart form
data with headers identifying the file, the chunk count and the chunk
number. Transient failures are retried per chunk; progress, retries and
the final outcome are reported through events.
"""

__version__ = "0.1.0"

from hugeuploader.core.exceptions import (
    ConfigurationError,
    HugeUploaderError,
    OpenError,
    ReadError,
    TransportError,
    UploadError,
    ValidationError,
)
from hugeuploader.models.events import RetryNotice, UploadEvent
from hugeuploader.models.progress import TransferState, UploadSummary
from hugeuploader.uploaders.controller import HugeUploader

__all__ = [
    "__version__",
    "HugeUploader",
    "UploadEvent",
    "RetryNotice",
    "TransferState",
    "UploadSummary",
    "HugeUploaderError",
    "ConfigurationError",
    "ValidationError",
    "OpenError",
    "ReadError",
    "TransportError",
    "UploadError",
]
