"""Session state and summary models for a chunked upload run."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class TransferState(Enum):
    """Controller states."""

    IDLE = "idle"
    SENDING = "sending"
    RETRYING = "retrying"
    ADVANCING = "advancing"
    FINISHED = "finished"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (TransferState.FINISHED, TransferState.FAILED)


@dataclass
class TransferSession:
    """In-memory state of one upload run.

    ``file_id`` and ``total_chunks`` are fixed at construction.
    """

    file_id: str
    file_size: int
    chunk_size_bytes: int
    total_chunks: int = field(init=False)
    chunk_index: int = 0
    retries_used: int = 0
    attempts: int = 0
    chunks_sent: int = 0
    bytes_sent: int = 0

    def __post_init__(self) -> None:
        self.total_chunks = math.ceil(self.file_size / self.chunk_size_bytes)

    @property
    def is_last_chunk(self) -> bool:
        """True when the current chunk is the final one."""
        return self.chunk_index + 1 == self.total_chunks

    @property
    def percent(self) -> int:
        """Integer progress, rounded half up, from accepted chunk count."""
        if self.total_chunks == 0:
            return 100
        return (200 * self.chunk_index + self.total_chunks) // (2 * self.total_chunks)


@dataclass
class UploadSummary:
    """Outcome of a complete upload run."""

    success: bool
    file_path: str
    file_id: str
    total_chunks: int
    chunks_sent: int
    total_bytes: int
    bytes_sent: int
    attempts: int
    duration: float
    error: Optional[str] = None

    @property
    def total_mb(self) -> float:
        """Return total megabytes."""
        return self.total_bytes / (1024 * 1024)

    @property
    def throughput_mbps(self) -> float:
        """Calculate upload throughput in MB/s."""
        if self.duration == 0:
            return 0.0
        return self.bytes_sent / (1024 * 1024) / self.duration

    def to_dict(self) -> dict[str, object]:
        return {
            "success": self.success,
            "file": self.file_path,
            "file_id": self.file_id,
            "total_chunks": self.total_chunks,
            "chunks_sent": self.chunks_sent,
            "total_mb": round(self.total_mb, 2),
            "attempts": self.attempts,
            "duration": round(self.duration, 2),
            "throughput_mbps": round(self.throughput_mbps, 2),
            "error": self.error,
        }
