"""Sequential chunk reader over a local file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, BinaryIO, Optional

from hugeuploader.core.exceptions import OpenError, ReadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Chunk:
    """A contiguous byte range of the source file."""

    index: int
    offset: int
    data: bytes
    is_last: bool

    @property
    def size(self) -> int:
        return len(self.data)


class ChunkReader:
    """Read a file in fixed-size chunks.

    The cursor only advances after a successful read and each read seeks
    to the cursor first, so calling ``next_chunk`` again after a
    ``ReadError`` returns the same byte range.
    """

    def __init__(self, path: str, chunk_size_bytes: int) -> None:
        self.path = path
        self.chunk_size_bytes = chunk_size_bytes
        self.offset = 0
        self.index = 0
        self._fh: Optional[BinaryIO] = None

    @property
    def is_open(self) -> bool:
        return self._fh is not None

    def open(self) -> None:
        """Open the source file read-only.

        Raises:
            OpenError: If the path does not exist or is not readable.
        """
        if self._fh is not None:
            return
        try:
            self._fh = open(self.path, "rb")
        except OSError as e:
            raise OpenError(self.path, e.strerror or str(e)) from e
        logger.debug("opened %s (fd=%d)", self.path, self._fh.fileno())

    def size(self) -> int:
        """Return the byte length of the open file.

        Raises:
            OpenError: If the file is not open or cannot be stat'ed.
        """
        if self._fh is None:
            raise OpenError(self.path, "file is not open")
        try:
            return os.fstat(self._fh.fileno()).st_size
        except OSError as e:
            raise OpenError(self.path, e.strerror or str(e)) from e

    def close(self) -> None:
        if self._fh is None:
            return
        fh, self._fh = self._fh, None
        fh.close()
        logger.debug("closed %s after %d chunks", self.path, self.index)

    def __enter__(self) -> ChunkReader:
        self.open()
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def next_chunk(self) -> Optional[Chunk]:
        """Read the next chunk.

        Returns:
            The chunk, or None at end of file (the handle is closed).

        Raises:
            ReadError: If the file is not open or the read fails.
        """
        if self._fh is None:
            raise ReadError(self.path, self.offset, "file is not open")

        try:
            self._fh.seek(self.offset)
            data = self._fh.read(self.chunk_size_bytes)
        except (OSError, ValueError) as e:
            raise ReadError(self.path, self.offset, str(e)) from e

        if not data:
            self.close()
            return None

        chunk = Chunk(
            index=self.index,
            offset=self.offset,
            data=data,
            is_last=len(data) < self.chunk_size_bytes,
        )
        logger.debug("read %d bytes for chunk %d", chunk.size, chunk.index)
        self.offset += chunk.size
        self.index += 1
        return chunk
