"""Tests for hugeuploader package imports and exports."""

from __future__ import annotations


class TestPackageImports:
    """Tests for package imports."""

    def test_import_hugeuploader(self):
        import hugeuploader

        assert hasattr(hugeuploader, "__version__")
        assert hugeuploader.HugeUploader is not None

    def test_import_core_modules(self):
        from hugeuploader.core import config, events, exceptions, logging, output, validation

        assert config is not None
        assert events is not None
        assert exceptions is not None
        assert logging is not None
        assert output is not None
        assert validation is not None

    def test_import_uploaders(self):
        from hugeuploader.uploaders import common, constants, controller, reader, sender

        assert common is not None
        assert constants is not None
        assert controller is not None
        assert reader is not None
        assert sender is not None

    def test_import_cli(self):
        from hugeuploader.cli import common, config_cmd, main, upload

        assert main is not None
        assert common is not None
        assert config_cmd is not None
        assert upload is not None


class TestExceptionHierarchy:
    """Tests for exception hierarchy."""

    def test_base_error(self):
        from hugeuploader.core.exceptions import HugeUploaderError

        exc = HugeUploaderError("test error", {"chunk": 3})
        assert str(exc) == "test error (chunk=3)"
        assert isinstance(exc, Exception)

    def test_transfer_errors(self):
        from hugeuploader.core.exceptions import (
            OpenError,
            ReadError,
            TransferError,
            TransportError,
        )

        assert issubclass(OpenError, TransferError)
        assert issubclass(ReadError, TransferError)
        assert issubclass(TransportError, TransferError)

        exc = TransportError("https://example.org", "connection refused")
        assert "example.org" in str(exc)
        assert "connection refused" in str(exc)

    def test_upload_error_details(self):
        from hugeuploader.core.exceptions import UploadError

        exc = UploadError("already started", file_path="/tmp/a.bin")
        assert exc.operation == "upload"
        assert "file=/tmp/a.bin" in str(exc)
