"""Event names and payload models emitted by the uploader."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from hugeuploader.models.base import BaseModel


class UploadEvent(str, Enum):
    """Events a caller can subscribe to with ``HugeUploader.on``."""

    PROGRESS = "progress"
    FINISH = "finish"
    ERROR = "error"
    FILE_RETRY = "fileRetry"


class RetryNotice(BaseModel):
    """Payload of the ``fileRetry`` event."""

    message: str = Field(..., description="Human-readable retry notice")
    chunk: int = Field(..., ge=0, description="Zero-based index of the chunk being retried")
    retries_left: int = Field(..., ge=0, alias="retriesLeft", description="Retries remaining")
