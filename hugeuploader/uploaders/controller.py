"""Chunked upload controller.

Drives a ``ChunkReader`` and a ``ChunkSender`` one chunk at a time:
read, send, classify the response, then advance, retry the same chunk
after a delay, or stop. Observers subscribe with ``on`` before calling
``start``:

    uploader = HugeUploader(endpoint="https://example.org/upload", file="big.iso")
    uploader.on("progress", lambda percent: print(percent))
    uploader.on("error", lambda message: print(message))
    summary = uploader.start()

Exactly one of ``finish`` or ``error`` fires per run.
"""

from __future__ import annotations

import logging
import math
import os
import time
from collections.abc import Callable, Mapping
from typing import Any, Optional

import httpx

from hugeuploader.core.events import EventEmitter
from hugeuploader.core.exceptions import (
    OpenError,
    ReadError,
    TransportError,
    UploadError,
    ValidationError,
)
from hugeuploader.core.validation import (
    validate_endpoint,
    validate_file_path,
    validate_mapping,
    validate_positive_int,
    validate_positive_number,
)
from hugeuploader.models.events import RetryNotice, UploadEvent
from hugeuploader.models.progress import TransferSession, TransferState, UploadSummary
from hugeuploader.uploaders.common import is_retryable_status, is_success_status, make_file_id
from hugeuploader.uploaders.constants import (
    BYTES_PER_MB,
    DEFAULT_CHUNK_SIZE_MB,
    DEFAULT_CHUNK_TIMEOUT_MS,
    DEFAULT_DELAY_BEFORE_RETRY,
    DEFAULT_RETRIES,
)
from hugeuploader.uploaders.reader import Chunk, ChunkReader
from hugeuploader.uploaders.sender import ChunkSender

logger = logging.getLogger(__name__)


class HugeUploader:
    """Upload one file in sequential chunks with per-chunk retries.

    Args:
        endpoint: URL receiving one POST per chunk.
        file: Path of the file to upload.
        headers: Extra request headers (protocol headers take precedence).
        post_params: Form fields sent with the last chunk only.
        chunk_size: Chunk size in megabytes.
        retries: Retries allowed per chunk.
        delay_before_retry: Seconds to wait before resending a failed chunk.
        verbose: Log diagnostic messages about each step.
        chunk_timeout: Per-chunk request timeout in milliseconds.
        verify_ssl: Verify TLS certificates when creating the HTTP client.
        client: HTTP client to use instead of creating one.
        sleep: Function used to wait between retries.

    Raises:
        ValidationError: If any argument is structurally invalid.
    """

    def __init__(
        self,
        endpoint: str,
        file: str | os.PathLike[str],
        headers: Mapping[str, Any] | None = None,
        post_params: Mapping[str, Any] | None = None,
        chunk_size: float = DEFAULT_CHUNK_SIZE_MB,
        retries: int = DEFAULT_RETRIES,
        delay_before_retry: float = DEFAULT_DELAY_BEFORE_RETRY,
        verbose: bool = False,
        chunk_timeout: int = DEFAULT_CHUNK_TIMEOUT_MS,
        *,
        verify_ssl: bool = True,
        client: httpx.Client | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.endpoint = validate_endpoint(endpoint)
        self.file = validate_file_path(file)
        self.headers = validate_mapping(headers, "headers")
        self.post_params = validate_mapping(post_params, "postParams")
        self.chunk_size = validate_positive_number(chunk_size, "chunkSize")
        self.retries = validate_positive_int(retries, "retries")
        self.delay_before_retry = validate_positive_number(delay_before_retry, "delayBeforeRetry")
        self.chunk_timeout = validate_positive_int(chunk_timeout, "chunkTimeout")
        self.verbose = bool(verbose)

        chunk_bytes = self.chunk_size * BYTES_PER_MB
        if isinstance(chunk_bytes, float) and not math.isfinite(chunk_bytes):
            raise ValidationError("chunkSize is too large", field="chunkSize", value=chunk_size)
        if chunk_bytes < 1:
            raise ValidationError(
                "chunkSize must be at least one byte", field="chunkSize", value=chunk_size
            )
        self.chunk_size_bytes = int(chunk_bytes)

        self.state = TransferState.IDLE
        self.session: Optional[TransferSession] = None
        self._sleep = sleep
        self._started_at = 0.0
        self._finished_at = 0.0
        self._error: Optional[str] = None
        self._events = EventEmitter(event.value for event in UploadEvent)
        self._sender = ChunkSender(
            self.endpoint,
            headers=self.headers,
            post_params=self.post_params,
            chunk_timeout=self.chunk_timeout,
            verify_ssl=verify_ssl,
            client=client,
        )

    # =========================================================================
    # Observers
    # =========================================================================

    def on(self, event: str | UploadEvent, handler: Callable[..., Any]) -> None:
        """Subscribe to ``progress``, ``finish``, ``error`` or ``fileRetry``."""
        self._events.on(event, handler)

    def off(self, event: str | UploadEvent, handler: Callable[..., Any]) -> bool:
        """Unsubscribe a handler registered with ``on``."""
        return self._events.off(event, handler)

    def log(self, message: str, *args: Any) -> None:
        """Log a diagnostic message when ``verbose`` is set."""
        if self.verbose:
            logger.info(message, *args)

    # =========================================================================
    # Session
    # =========================================================================

    @property
    def file_id(self) -> Optional[str]:
        return self.session.file_id if self.session else None

    @property
    def total_chunks(self) -> Optional[int]:
        return self.session.total_chunks if self.session else None

    def start(self) -> UploadSummary:
        """Run the upload to completion.

        Returns:
            Summary of the run; ``success`` mirrors whether ``finish`` fired.

        Raises:
            UploadError: If this uploader has already been started.
        """
        if self.state is not TransferState.IDLE:
            raise UploadError("Upload already started", file_path=self.file)

        self._started_at = time.monotonic()
        self.state = TransferState.SENDING
        reader = ChunkReader(self.file, self.chunk_size_bytes)

        try:
            reader.open()
            file_size = reader.size()
        except OpenError as e:
            self.log("huge uploader start err %s", e)
            self._fail(f"Failed starting to send chunks: {e}")
        else:
            self.session = TransferSession(
                file_id=make_file_id(file_size),
                file_size=file_size,
                chunk_size_bytes=self.chunk_size_bytes,
            )
            self.log(
                "uploading %s: %d bytes in %d chunks (file id %s)",
                self.file,
                file_size,
                self.session.total_chunks,
                self.session.file_id,
            )
            self._send_chunks(reader, self.session)
        finally:
            # the handle is released on every exit path, not only at EOF
            reader.close()
            self._sender.close()
            self._finished_at = time.monotonic()

        return self.summary()

    def _send_chunks(self, reader: ChunkReader, session: TransferSession) -> None:
        if session.total_chunks == 0:
            self.log("%s is empty, nothing to send", self.file)
            self._finish(session)
            return

        chunk: Optional[Chunk] = None
        while not self.state.is_terminal:
            try:
                if chunk is None:
                    self.log("reading chunk %d", session.chunk_index)
                    chunk = reader.next_chunk()
                    if chunk is None:
                        self._fail(
                            f"Unexpected end of file before chunk {session.chunk_index}. "
                            "Stopping upload"
                        )
                        return

                is_last = chunk.is_last or session.is_last_chunk
                self.state = TransferState.SENDING
                session.attempts += 1
                self.log("sending chunk %d lastChunk=%s", session.chunk_index, is_last)
                resp = self._sender.send(
                    chunk,
                    session.chunk_index,
                    is_last,
                    file_id=session.file_id,
                    total_chunks=session.total_chunks,
                )
            except (ReadError, TransportError) as e:
                self.log("huge uploader err %s", e)
                self._manage_retries(session, str(e))
                continue

            self.log("huge uploader res.status %d", resp.status_code)

            if is_success_status(resp.status_code):
                session.retries_used = 0
                session.chunks_sent += 1
                session.bytes_sent += chunk.size
                if session.is_last_chunk:
                    self._finish(session)
                    return
                session.chunk_index += 1
                chunk = None
                self.state = TransferState.ADVANCING
                self._events.emit(UploadEvent.PROGRESS, session.percent)

            # errors that might be temporary, wait a bit then retry
            elif is_retryable_status(resp.status_code):
                self._manage_retries(session, f"HTTP {resp.status_code}")

            else:
                self._fail(f"Server responded with {resp.status_code}. Stopping upload")

    def _manage_retries(self, session: TransferSession, reason: str) -> None:
        """Schedule a resend of the current chunk or fail when out of retries."""
        session.retries_used += 1
        if session.retries_used <= self.retries:
            retries_left = self.retries - session.retries_used
            notice = RetryNotice(
                message=(
                    f"An error occurred uploading chunk {session.chunk_index}. "
                    f"{retries_left} retries left"
                ),
                chunk=session.chunk_index,
                retries_left=retries_left,
            )
            self.state = TransferState.RETRYING
            logger.warning(
                "Chunk %d failed (%s), retrying in %ss (%d retries left)",
                session.chunk_index,
                reason,
                self.delay_before_retry,
                retries_left,
            )
            self._events.emit(UploadEvent.FILE_RETRY, notice)
            self._sleep(self.delay_before_retry)
            return

        self._fail(
            f"An error occurred uploading chunk {session.chunk_index}. "
            "No more retries, stopping upload"
        )

    def _finish(self, session: TransferSession) -> None:
        session.chunk_index = session.total_chunks
        self.state = TransferState.FINISHED
        self._events.emit(UploadEvent.PROGRESS, session.percent)
        self._events.emit(UploadEvent.FINISH)

    def _fail(self, message: str) -> None:
        if self.state.is_terminal:
            return
        self.state = TransferState.FAILED
        self._error = message
        logger.warning("Upload of %s failed: %s", self.file, message)
        self._events.emit(UploadEvent.ERROR, message)

    def summary(self) -> UploadSummary:
        """Build a summary of the run so far."""
        session = self.session
        end = self._finished_at or time.monotonic()
        return UploadSummary(
            success=self.state is TransferState.FINISHED,
            file_path=self.file,
            file_id=session.file_id if session else "",
            total_chunks=session.total_chunks if session else 0,
            chunks_sent=session.chunks_sent if session else 0,
            total_bytes=session.file_size if session else 0,
            bytes_sent=session.bytes_sent if session else 0,
            attempts=session.attempts if session else 0,
            duration=end - self._started_at if self._started_at else 0.0,
            error=self._error,
        )
