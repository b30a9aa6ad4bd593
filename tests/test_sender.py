"""Tests for hugeuploader.uploaders.sender."""

from __future__ import annotations

import httpx
import pytest

from hugeuploader.core.exceptions import TransportError
from hugeuploader.uploaders.reader import Chunk
from hugeuploader.uploaders.sender import ChunkSender, build_headers

ENDPOINT = "https://files.example.org/upload"


@pytest.fixture
def chunk() -> Chunk:
    return Chunk(index=0, offset=0, data=b"chunk-bytes", is_last=False)


# =============================================================================
# build_headers Tests
# =============================================================================


class TestBuildHeaders:
    """Tests for build_headers function."""

    def test_sets_protocol_headers(self):
        headers = build_headers({}, file_id="123", total_chunks=4, chunk_index=2)

        assert headers == {
            "uploader-file-id": "123",
            "uploader-chunks-total": "4",
            "uploader-chunk-number": "2",
        }

    def test_keeps_custom_headers(self):
        headers = build_headers(
            {"Authorization": "Bearer x", "X-Trace": 7},
            file_id="1",
            total_chunks=1,
            chunk_index=0,
        )

        assert headers["Authorization"] == "Bearer x"
        assert headers["X-Trace"] == "7"

    def test_protocol_headers_win_regardless_of_case(self):
        headers = build_headers(
            {"Uploader-Chunk-Number": "42", "UPLOADER-FILE-ID": "spoofed"},
            file_id="1",
            total_chunks=3,
            chunk_index=0,
        )

        assert "Uploader-Chunk-Number" not in headers
        assert "UPLOADER-FILE-ID" not in headers
        assert headers["uploader-chunk-number"] == "0"
        assert headers["uploader-file-id"] == "1"

    def test_does_not_mutate_input(self):
        custom = {"Authorization": "Bearer x"}

        build_headers(custom, file_id="1", total_chunks=1, chunk_index=0)

        assert custom == {"Authorization": "Bearer x"}


# =============================================================================
# ChunkSender Tests
# =============================================================================


class TestChunkSender:
    """Tests for the multipart request sent per chunk."""

    def _sender(self, server, **kwargs) -> ChunkSender:
        return ChunkSender(ENDPOINT, client=server.client(), **kwargs)

    def test_posts_multipart_chunk(self, server_factory, chunk):
        server = server_factory()

        resp = self._sender(server).send(chunk, 0, False, file_id="9", total_chunks=2)

        assert resp.status_code == 200
        request = server.requests[0]
        body = server.bodies[0]
        assert request.method == "POST"
        assert str(request.url) == ENDPOINT
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert b'name="file"' in body
        assert b"Content-Type: application/octet-stream" in body
        assert b"chunk-bytes" in body

    def test_post_params_only_when_last(self, server_factory, chunk):
        server = server_factory()
        sender = self._sender(server, post_params={"title": "summer", "count": 3})

        sender.send(chunk, 0, False, file_id="9", total_chunks=2)
        sender.send(chunk, 1, True, file_id="9", total_chunks=2)

        assert b'name="title"' not in server.bodies[0]
        assert b'name="title"' in server.bodies[1]
        assert b"summer" in server.bodies[1]
        assert b'name="count"' in server.bodies[1]

    def test_chunk_number_changes_per_call(self, server_factory, chunk):
        server = server_factory()
        sender = self._sender(server, headers={"uploader-chunk-number": "x"})

        sender.send(chunk, 0, False, file_id="9", total_chunks=3)
        sender.send(chunk, 1, False, file_id="9", total_chunks=3)

        assert server.chunk_numbers == [0, 1]
        assert sender.headers == {"uploader-chunk-number": "x"}

    def test_applies_chunk_timeout(self, server_factory, chunk):
        server = server_factory()

        self._sender(server, chunk_timeout=2500).send(chunk, 0, True, file_id="9", total_chunks=1)

        timeout = server.requests[0].extensions["timeout"]
        assert timeout["read"] == 2.5
        assert timeout["connect"] == 2.5

    def test_returns_error_statuses(self, server_factory, chunk):
        server = server_factory([503])

        resp = self._sender(server).send(chunk, 0, True, file_id="9", total_chunks=1)

        assert resp.status_code == 503

    def test_timeout_becomes_transport_error(self, server_factory, chunk):
        server = server_factory([httpx.WriteTimeout("slow")])

        with pytest.raises(TransportError, match="Timeout after 1s"):
            self._sender(server, chunk_timeout=1000).send(
                chunk, 0, True, file_id="9", total_chunks=1
            )

    def test_connect_error_becomes_transport_error(self, server_factory, chunk):
        server = server_factory([httpx.ConnectError("Name or service not known")])

        with pytest.raises(TransportError, match="ConnectError") as exc_info:
            self._sender(server).send(chunk, 0, True, file_id="9", total_chunks=1)

        assert exc_info.value.url == ENDPOINT

    def test_close_leaves_injected_client_open(self, server_factory):
        client = server_factory().client()
        sender = ChunkSender(ENDPOINT, client=client)

        sender.close()

        assert client.is_closed is False

    def test_close_closes_owned_client(self):
        sender = ChunkSender(ENDPOINT, verify_ssl=False)
        client = sender._get_client()

        sender.close()

        assert client.is_closed is True

    def test_redirect_loop_becomes_transport_error(self, chunk):
        def loop_back(request: httpx.Request) -> httpx.Response:
            return httpx.Response(307, headers={"Location": str(request.url)})

        client = httpx.Client(transport=httpx.MockTransport(loop_back), follow_redirects=True)

        with pytest.raises(TransportError, match="TooManyRedirects"):
            ChunkSender(ENDPOINT, client=client).send(chunk, 0, True, file_id="9", total_chunks=1)

    def test_decoding_error_becomes_transport_error(self, server_factory, chunk):
        server = server_factory([httpx.DecodingError("bad gzip")])

        with pytest.raises(TransportError, match="DecodingError"):
            self._sender(server).send(chunk, 0, True, file_id="9", total_chunks=1)
