"""Tests for hugeuploader.uploaders.reader."""

from __future__ import annotations

import math
from pathlib import Path

import pytest

from hugeuploader.core.exceptions import OpenError, ReadError
from hugeuploader.uploaders.constants import BYTES_PER_MB
from hugeuploader.uploaders.reader import ChunkReader


def read_all(reader: ChunkReader) -> list:
    chunks = []
    while (chunk := reader.next_chunk()) is not None:
        chunks.append(chunk)
    return chunks


class FlakyFile:
    """File wrapper whose first read raises OSError."""

    def __init__(self, fh):
        self._fh = fh
        self.failed = False

    def read(self, size: int) -> bytes:
        if not self.failed:
            self.failed = True
            self._fh.read(3)  # move the underlying position before failing
            raise OSError(5, "Input/output error")
        return self._fh.read(size)

    def __getattr__(self, name):
        return getattr(self._fh, name)


# =============================================================================
# Chunk Boundaries
# =============================================================================


class TestChunkBoundaries:
    """Tests for chunk sizes and the last-chunk flag."""

    def test_25mb_file_with_10mb_chunks(self, temp_dir: Path):
        path = temp_dir / "big.bin"
        path.write_bytes(b"\x01" * (25 * BYTES_PER_MB))

        with ChunkReader(str(path), 10 * BYTES_PER_MB) as reader:
            chunks = read_all(reader)

        assert [c.size for c in chunks] == [10 * BYTES_PER_MB, 10 * BYTES_PER_MB, 5 * BYTES_PER_MB]
        assert [c.is_last for c in chunks] == [False, False, True]
        assert [c.index for c in chunks] == [0, 1, 2]
        assert [c.offset for c in chunks] == [0, 10 * BYTES_PER_MB, 20 * BYTES_PER_MB]

    def test_exact_multiple_has_no_short_chunk(self, make_file):
        reader = ChunkReader(str(make_file(20)), 10)
        reader.open()

        chunks = read_all(reader)

        assert [c.size for c in chunks] == [10, 10]
        assert [c.is_last for c in chunks] == [False, False]

    @pytest.mark.parametrize("size,chunk_size", [(1, 1), (7, 3), (100, 7), (64, 64), (65, 64)])
    def test_chunk_count_and_total_bytes(self, make_file, size: int, chunk_size: int):
        path = make_file(size)

        with ChunkReader(str(path), chunk_size) as reader:
            chunks = read_all(reader)

        assert len(chunks) == math.ceil(size / chunk_size)
        assert b"".join(c.data for c in chunks) == path.read_bytes()

    def test_empty_file_is_immediately_eof(self, make_file):
        with ChunkReader(str(make_file(0)), 10) as reader:
            assert reader.size() == 0
            assert reader.next_chunk() is None
            assert reader.is_open is False


# =============================================================================
# Handle Management
# =============================================================================


class TestHandleManagement:
    """Tests for opening, closing and failures."""

    def test_eof_closes_handle(self, make_file):
        reader = ChunkReader(str(make_file(5)), 10)
        reader.open()

        assert reader.next_chunk() is not None
        assert reader.is_open is True
        assert reader.next_chunk() is None
        assert reader.is_open is False

    def test_context_manager_closes_early(self, make_file):
        with ChunkReader(str(make_file(50)), 10) as reader:
            reader.next_chunk()

        assert reader.is_open is False

    def test_close_is_idempotent(self, make_file):
        reader = ChunkReader(str(make_file(5)), 10)
        reader.open()
        reader.close()
        reader.close()

        assert reader.is_open is False

    def test_missing_file_raises_open_error(self, temp_dir: Path):
        reader = ChunkReader(str(temp_dir / "nope.bin"), 10)

        with pytest.raises(OpenError, match="nope.bin"):
            reader.open()

    def test_directory_raises_open_error(self, temp_dir: Path):
        with pytest.raises(OpenError):
            ChunkReader(str(temp_dir), 10).open()

    def test_read_before_open_raises_read_error(self, make_file):
        reader = ChunkReader(str(make_file(5)), 10)

        with pytest.raises(ReadError, match="not open"):
            reader.next_chunk()

    def test_reread_after_failure_returns_same_range(self, make_file):
        path = make_file(25)
        reader = ChunkReader(str(path), 10)
        reader.open()
        reader.next_chunk()
        reader._fh = FlakyFile(reader._fh)

        with pytest.raises(ReadError, match="offset 10"):
            reader.next_chunk()
        chunk = reader.next_chunk()

        assert chunk.index == 1
        assert chunk.data == path.read_bytes()[10:20]
        reader.close()
