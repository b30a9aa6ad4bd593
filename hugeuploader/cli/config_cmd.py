"""Config commands for hugeuploader."""

from __future__ import annotations

from typing import Optional

import click

from hugeuploader.core.config import CONFIG_FILE, Config
from hugeuploader.core.exceptions import HugeUploaderError
from hugeuploader.core.output import OutputFormat, print_error, print_output, print_success
from hugeuploader.core.validation import (
    parse_header,
    validate_endpoint,
    validate_positive_int,
    validate_positive_number,
)
from hugeuploader.uploaders.constants import (
    DEFAULT_CHUNK_SIZE_MB,
    DEFAULT_CHUNK_TIMEOUT_MS,
    DEFAULT_DELAY_BEFORE_RETRY,
    DEFAULT_RETRIES,
)


@click.group()
def config() -> None:
    """Manage hugeuploader configuration."""
    pass


@config.command("init")
@click.option("--endpoint", prompt="Upload endpoint URL", help="Upload endpoint URL")
@click.option("--profile", default="default", help="Profile name")
@click.option("--header", "-H", "headers", multiple=True, help="Header 'Name: value' (repeatable)")
@click.option("--chunk-size", type=float, default=DEFAULT_CHUNK_SIZE_MB, show_default=True)
@click.option("--retries", type=int, default=DEFAULT_RETRIES, show_default=True)
@click.option("--delay", type=float, default=DEFAULT_DELAY_BEFORE_RETRY, show_default=True)
@click.option("--timeout", type=int, default=DEFAULT_CHUNK_TIMEOUT_MS, show_default=True)
@click.option("--force", is_flag=True, help="Overwrite an existing profile")
def config_init(
    endpoint: str,
    profile: str,
    headers: tuple[str, ...],
    chunk_size: float,
    retries: int,
    delay: float,
    timeout: int,
    force: bool,
) -> None:
    """Create or extend the configuration file with a profile.

    Example:
        hugeuploader config init --endpoint https://files.example.org/upload
    """
    try:
        endpoint = validate_endpoint(endpoint)
        settings = {
            "headers": dict(parse_header(h) for h in headers),
            "chunk_size": validate_positive_number(chunk_size, "chunk_size"),
            "retries": validate_positive_int(retries, "retries"),
            "delay_before_retry": validate_positive_number(delay, "delay"),
            "chunk_timeout": validate_positive_int(timeout, "timeout"),
        }
        cfg = Config.load() if CONFIG_FILE.exists() else Config()
    except HugeUploaderError as e:
        print_error(str(e))
        raise SystemExit(1)

    if cfg.has_profile(profile) and not force:
        print_error(f"Profile '{profile}' already exists. Use --force to overwrite.")
        raise SystemExit(1)

    cfg.add_profile(profile, endpoint, **settings)

    # First profile becomes the default
    if len(cfg.profiles) == 1:
        cfg.default_profile = profile

    cfg.save()

    print_success(f"Configuration saved to {CONFIG_FILE}")
    print_output({"profile": profile, **cfg.get_profile(profile).to_dict()})


@config.command("show")
@click.option("--output", "-o", type=click.Choice(["json", "table"]), default="table")
@click.option("--profile", "-p", "profile_name", default=None, help="Show only this profile")
def config_show(output: str, profile_name: Optional[str]) -> None:
    """Show current configuration."""
    try:
        cfg = Config.load()
        profiles = (
            {profile_name: cfg.get_profile(profile_name)} if profile_name else cfg.profiles
        )
    except HugeUploaderError as e:
        print_error(str(e))
        raise SystemExit(1)

    data = {
        "config_file": str(CONFIG_FILE),
        "default_profile": cfg.default_profile,
        "profiles": {name: p.to_dict() for name, p in profiles.items()},
    }
    print_output(data, format=OutputFormat.from_string(output))
