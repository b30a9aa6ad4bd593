"""Pytest configuration and fixtures for hugeuploader tests."""

from __future__ import annotations

import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Generator, Union

import httpx
import pytest

from hugeuploader.uploaders.constants import BYTES_PER_MB

Outcome = Union[int, Exception]


class ScriptedServer:
    """Answer chunk POSTs from a scripted list of statuses or exceptions.

    Once the script runs out every request gets ``default``.
    """

    def __init__(self, responses: list[Outcome] | None = None, default: Outcome = 200) -> None:
        self.responses = list(responses or [])
        self.default = default
        self.requests: list[httpx.Request] = []
        self.bodies: list[bytes] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.bodies.append(request.read())
        self.requests.append(request)
        outcome = self.responses.pop(0) if self.responses else self.default
        if isinstance(outcome, Exception):
            raise outcome
        return httpx.Response(outcome)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))

    @property
    def chunk_numbers(self) -> list[int]:
        return [int(r.headers["uploader-chunk-number"]) for r in self.requests]


def chunk_mb(num_bytes: int) -> float:
    """Express a byte count as the megabyte chunk size the uploader takes."""
    return num_bytes / BYTES_PER_MB


@pytest.fixture
def server_factory() -> type[ScriptedServer]:
    """Build scripted servers: ``server_factory([503, 200])``."""
    return ScriptedServer


@pytest.fixture
def mb() -> Callable[[int], float]:
    """Convert a byte count to a chunk size in MB."""
    return chunk_mb


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_file(temp_dir: Path) -> Callable[..., Path]:
    """Factory writing a file of ``size`` bytes with a repeating byte pattern."""

    def _make(size: int, name: str = "upload.bin") -> Path:
        path = temp_dir / name
        path.write_bytes(bytes(i % 251 for i in range(size)))
        return path

    return _make


@pytest.fixture
def no_sleep() -> list[float]:
    """Record retry delays instead of sleeping."""
    return []


@pytest.fixture
def isolated_config(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config loading at a temp file and clear environment overrides."""
    config_file = temp_dir / "config" / "config.yaml"
    monkeypatch.setattr("hugeuploader.core.config.CONFIG_FILE", config_file)
    monkeypatch.setattr("hugeuploader.cli.config_cmd.CONFIG_FILE", config_file)
    for name in (
        "HUGE_UPLOADER_ENDPOINT",
        "HUGE_UPLOADER_PROFILE",
        "HUGE_UPLOADER_CHUNK_SIZE",
        "HUGE_UPLOADER_RETRIES",
        "HUGE_UPLOADER_VERIFY_SSL",
    ):
        monkeypatch.delenv(name, raising=False)
    return config_file


@pytest.fixture
def sample_config_yaml() -> str:
    """Sample config YAML content."""
    return """
default_profile: test

profiles:
  test:
    endpoint: https://files-test.example.org/upload
    headers:
      Authorization: Bearer test-token
    chunk_size: 5
    retries: 3
    delay_before_retry: 1
    verify_ssl: false

  production:
    endpoint: https://files.example.org/upload
"""
