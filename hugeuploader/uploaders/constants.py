"""Shared constants for the chunked uploader.

Defaults match the wire protocol expected by huge-uploader compatible
servers: one multipart POST per chunk, chunk order carried in headers.
"""

# =============================================================================
# Transfer Defaults
# =============================================================================

# Chunk size in megabytes
DEFAULT_CHUNK_SIZE_MB = 10

# Retries allowed per chunk before the upload fails
DEFAULT_RETRIES = 5

# Seconds to wait before resending a failed chunk
DEFAULT_DELAY_BEFORE_RETRY = 5

# Per-chunk request timeout in milliseconds (1 hour)
DEFAULT_CHUNK_TIMEOUT_MS = 60 * 60 * 1000

BYTES_PER_MB = 1024 * 1024

# =============================================================================
# Wire Protocol
# =============================================================================

HEADER_FILE_ID = "uploader-file-id"
HEADER_CHUNKS_TOTAL = "uploader-chunks-total"
HEADER_CHUNK_NUMBER = "uploader-chunk-number"
PROTOCOL_HEADERS = frozenset({HEADER_FILE_ID, HEADER_CHUNKS_TOTAL, HEADER_CHUNK_NUMBER})

FILE_FIELD = "file"
FILE_FIELD_FILENAME = "blob"
CHUNK_CONTENT_TYPE = "application/octet-stream"

SUCCESS_STATUS_CODES = frozenset({200, 201, 204})
RETRYABLE_STATUS_CODES = frozenset({408, 502, 503, 504})
