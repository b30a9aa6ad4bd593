"""Upload command for hugeuploader."""

from __future__ import annotations

import logging
from typing import Any, Optional

import click

from hugeuploader.cli.common import Context, ExitCode, global_options, handle_errors
from hugeuploader.core.logging import log_context
from hugeuploader.core.output import (
    OutputFormat,
    create_progress,
    print_error,
    print_output,
    print_success,
    print_warning,
)
from hugeuploader.core.validation import parse_field, parse_header
from hugeuploader.models.events import RetryNotice, UploadEvent
from hugeuploader.uploaders.constants import (
    DEFAULT_CHUNK_SIZE_MB,
    DEFAULT_CHUNK_TIMEOUT_MS,
    DEFAULT_DELAY_BEFORE_RETRY,
    DEFAULT_RETRIES,
)
from hugeuploader.uploaders.controller import HugeUploader

logger = logging.getLogger(__name__)

SUMMARY_LABELS = {
    "file_id": "File ID",
    "total_chunks": "Chunks",
    "chunks_sent": "Chunks Sent",
    "total_mb": "Size (MB)",
    "throughput_mbps": "Throughput (MB/s)",
    "duration": "Duration (s)",
}


def _pick(option: Any, profile_value: Any, default: Any) -> Any:
    """Return the first value that is set: CLI option, profile, default."""
    if option is not None:
        return option
    if profile_value is not None:
        return profile_value
    return default


@click.command("upload")
@click.argument("file", type=click.Path(dir_okay=False))
@click.option("--endpoint", "-e", help="Upload endpoint URL (defaults to the profile endpoint)")
@click.option(
    "--header",
    "-H",
    "headers",
    multiple=True,
    help="Extra request header 'Name: value' (repeatable)",
)
@click.option(
    "--field",
    "-F",
    "fields",
    multiple=True,
    help="Form field 'key=value' sent with the last chunk (repeatable)",
)
@click.option("--chunk-size", type=float, help=f"Chunk size in MB [default: {DEFAULT_CHUNK_SIZE_MB}]")
@click.option("--retries", type=int, help=f"Retries per chunk [default: {DEFAULT_RETRIES}]")
@click.option(
    "--delay",
    type=float,
    help=f"Seconds before resending a failed chunk [default: {DEFAULT_DELAY_BEFORE_RETRY}]",
)
@click.option(
    "--timeout",
    type=int,
    help=f"Per-chunk timeout in milliseconds [default: {DEFAULT_CHUNK_TIMEOUT_MS}]",
)
@click.option("--insecure", is_flag=True, help="Skip TLS certificate verification")
@global_options
@handle_errors
def upload(
    ctx: Context,
    file: str,
    endpoint: Optional[str],
    headers: tuple[str, ...],
    fields: tuple[str, ...],
    chunk_size: Optional[float],
    retries: Optional[int],
    delay: Optional[float],
    timeout: Optional[int],
    insecure: bool,
) -> None:
    """Upload FILE in sequential chunks.

    Example:
        hugeuploader upload backup.tar -e https://files.example.org/upload
        hugeuploader upload video.mp4 -H "Authorization: Bearer TOKEN" -F title=holiday
    """
    profile = ctx.get_profile(required=endpoint is None)

    request_headers = dict(profile.headers) if profile else {}
    request_headers.update(parse_header(h) for h in headers)
    post_params = dict(parse_field(f) for f in fields)

    uploader = HugeUploader(
        endpoint=_pick(endpoint, profile and profile.endpoint, None),
        file=file,
        headers=request_headers,
        post_params=post_params,
        chunk_size=_pick(chunk_size, profile and profile.chunk_size, DEFAULT_CHUNK_SIZE_MB),
        retries=_pick(retries, profile and profile.retries, DEFAULT_RETRIES),
        delay_before_retry=_pick(
            delay, profile and profile.delay_before_retry, DEFAULT_DELAY_BEFORE_RETRY
        ),
        verbose=ctx.verbose,
        chunk_timeout=_pick(timeout, profile and profile.chunk_timeout, DEFAULT_CHUNK_TIMEOUT_MS),
        verify_ssl=False if insecure else (profile.verify_ssl if profile else True),
    )

    def on_retry(notice: RetryNotice) -> None:
        if not ctx.quiet:
            print_warning(notice.message)

    uploader.on(UploadEvent.FILE_RETRY, on_retry)

    show_progress = ctx.output_format == OutputFormat.TABLE and not ctx.quiet

    with log_context("upload", logger, file=file, endpoint=uploader.endpoint) as log:
        if show_progress:
            with create_progress() as progress:
                task = progress.add_task(f"Uploading {click.format_filename(file)}...", total=100)
                uploader.on(
                    UploadEvent.PROGRESS,
                    lambda percent: progress.update(task, completed=percent),
                )
                summary = uploader.start()
        else:
            summary = uploader.start()
        log.update(
            file_id=summary.file_id,
            chunks_sent=f"{summary.chunks_sent}/{summary.total_chunks}",
            success=summary.success,
        )

    if ctx.output_format == OutputFormat.JSON:
        print_output(summary.to_dict(), format=OutputFormat.JSON)
    elif summary.success:
        print_success(f"Uploaded {file}")
        if not ctx.quiet:
            data = summary.to_dict()
            print_output({key: data[key] for key in SUMMARY_LABELS}, key_labels=SUMMARY_LABELS)

    if not summary.success:
        if ctx.output_format != OutputFormat.JSON:
            print_error(summary.error or "Upload failed")
        raise SystemExit(ExitCode.GENERAL_ERROR)
