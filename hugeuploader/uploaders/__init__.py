"""Chunked upload pipeline for hugeuploader.

- ``ChunkReader`` reads fixed-size chunks from the source file
- ``ChunkSender`` POSTs one chunk as multipart form data
- ``HugeUploader`` drives both, retrying transient failures
"""

from hugeuploader.uploaders.common import is_retryable_status, is_success_status, make_file_id
from hugeuploader.uploaders.constants import (
    DEFAULT_CHUNK_SIZE_MB,
    DEFAULT_CHUNK_TIMEOUT_MS,
    DEFAULT_DELAY_BEFORE_RETRY,
    DEFAULT_RETRIES,
    HEADER_CHUNK_NUMBER,
    HEADER_CHUNKS_TOTAL,
    HEADER_FILE_ID,
    RETRYABLE_STATUS_CODES,
    SUCCESS_STATUS_CODES,
)
from hugeuploader.uploaders.controller import HugeUploader
from hugeuploader.uploaders.reader import Chunk, ChunkReader
from hugeuploader.uploaders.sender import ChunkSender, build_headers

__all__ = [
    # Constants
    "DEFAULT_CHUNK_SIZE_MB",
    "DEFAULT_CHUNK_TIMEOUT_MS",
    "DEFAULT_DELAY_BEFORE_RETRY",
    "DEFAULT_RETRIES",
    "HEADER_CHUNK_NUMBER",
    "HEADER_CHUNKS_TOTAL",
    "HEADER_FILE_ID",
    "RETRYABLE_STATUS_CODES",
    "SUCCESS_STATUS_CODES",
    # Helpers
    "is_retryable_status",
    "is_success_status",
    "make_file_id",
    "build_headers",
    # Pipeline
    "Chunk",
    "ChunkReader",
    "ChunkSender",
    "HugeUploader",
]
