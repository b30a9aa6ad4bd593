"""Data models for hugeuploader."""

from hugeuploader.models.base import BaseModel
from hugeuploader.models.events import RetryNotice, UploadEvent
from hugeuploader.models.progress import TransferSession, TransferState, UploadSummary

__all__ = [
    "BaseModel",
    "RetryNotice",
    "UploadEvent",
    "TransferSession",
    "TransferState",
    "UploadSummary",
]
