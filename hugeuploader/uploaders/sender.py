"""HTTP sender for a single upload chunk."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from hugeuploader.core.exceptions import TransportError
from hugeuploader.uploaders.constants import (
    CHUNK_CONTENT_TYPE,
    DEFAULT_CHUNK_TIMEOUT_MS,
    FILE_FIELD,
    FILE_FIELD_FILENAME,
    HEADER_CHUNK_NUMBER,
    HEADER_CHUNKS_TOTAL,
    HEADER_FILE_ID,
    PROTOCOL_HEADERS,
)
from hugeuploader.uploaders.reader import Chunk

logger = logging.getLogger(__name__)


def build_headers(
    custom_headers: Mapping[str, Any],
    *,
    file_id: str,
    total_chunks: int,
    chunk_index: int,
) -> dict[str, str]:
    """Build the request headers for one chunk.

    Caller headers come first; the protocol headers always win, compared
    case-insensitively.
    """
    headers = {
        str(name): str(value)
        for name, value in custom_headers.items()
        if str(name).lower() not in PROTOCOL_HEADERS
    }
    headers[HEADER_FILE_ID] = str(file_id)
    headers[HEADER_CHUNKS_TOTAL] = str(total_chunks)
    headers[HEADER_CHUNK_NUMBER] = str(chunk_index)
    return headers


class ChunkSender:
    """POST one chunk at a time as multipart form data.

    Creates its own ``httpx.Client`` unless one is injected; only a client
    it created is closed by ``close``.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        headers: Mapping[str, Any] | None = None,
        post_params: Mapping[str, Any] | None = None,
        chunk_timeout: int = DEFAULT_CHUNK_TIMEOUT_MS,
        verify_ssl: bool = True,
        client: httpx.Client | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.headers = dict(headers or {})
        self.post_params = dict(post_params or {})
        self.chunk_timeout = chunk_timeout
        self.verify_ssl = verify_ssl
        self._client = client
        self._owns_client = client is None

    @property
    def timeout_seconds(self) -> float:
        return self.chunk_timeout / 1000

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.Client(verify=self.verify_ssl, follow_redirects=True)
            self._owns_client = True
        return self._client

    def close(self) -> None:
        """Close the HTTP client if this sender created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def __enter__(self) -> ChunkSender:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def send(
        self,
        chunk: Chunk,
        chunk_index: int,
        is_last: bool,
        *,
        file_id: str,
        total_chunks: int,
    ) -> httpx.Response:
        """Send one chunk.

        Args:
            chunk: Chunk bytes read from the file.
            chunk_index: Zero-based chunk number sent in the headers.
            is_last: Attach post params when True.
            file_id: Session file identifier.
            total_chunks: Session chunk count.

        Returns:
            The HTTP response, whatever its status.

        Raises:
            TransportError: On connection, DNS, read, timeout, redirect-loop or
                decoding failure.
        """
        data = {str(k): str(v) for k, v in self.post_params.items()} if is_last else None
        files = {FILE_FIELD: (FILE_FIELD_FILENAME, chunk.data, CHUNK_CONTENT_TYPE)}
        headers = build_headers(
            self.headers,
            file_id=file_id,
            total_chunks=total_chunks,
            chunk_index=chunk_index,
        )

        logger.debug(
            "POST %s chunk=%d bytes=%d last=%s",
            self.endpoint,
            chunk_index,
            chunk.size,
            is_last,
        )
        try:
            return self._get_client().post(
                self.endpoint,
                data=data,
                files=files,
                headers=headers,
                timeout=self.timeout_seconds,
            )
        except httpx.TimeoutException as e:
            raise TransportError(self.endpoint, f"Timeout after {self.timeout_seconds:g}s") from e
        except httpx.RequestError as e:
            raise TransportError(self.endpoint, f"{type(e).__name__}: {e}") from e
