"""Configuration management for hugeuploader.

Supports YAML profiles and environment variable overrides.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from hugeuploader.core.exceptions import ConfigurationError, ProfileNotFoundError
from hugeuploader.uploaders.constants import (
    DEFAULT_CHUNK_SIZE_MB,
    DEFAULT_CHUNK_TIMEOUT_MS,
    DEFAULT_DELAY_BEFORE_RETRY,
    DEFAULT_RETRIES,
)

# =============================================================================
# Constants
# =============================================================================

CONFIG_DIR = Path.home() / ".config" / "hugeuploader"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

# Environment variable names
ENV_ENDPOINT = "HUGE_UPLOADER_ENDPOINT"
ENV_PROFILE = "HUGE_UPLOADER_PROFILE"
ENV_CHUNK_SIZE = "HUGE_UPLOADER_CHUNK_SIZE"
ENV_RETRIES = "HUGE_UPLOADER_RETRIES"
ENV_VERIFY_SSL = "HUGE_UPLOADER_VERIFY_SSL"


# =============================================================================
# Profile
# =============================================================================


@dataclass
class Profile:
    """Upload settings for one endpoint."""

    endpoint: str
    headers: dict[str, str] = field(default_factory=dict)
    chunk_size: float = DEFAULT_CHUNK_SIZE_MB
    retries: int = DEFAULT_RETRIES
    delay_before_retry: float = DEFAULT_DELAY_BEFORE_RETRY
    chunk_timeout: int = DEFAULT_CHUNK_TIMEOUT_MS
    verify_ssl: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        data: dict[str, Any] = {
            "endpoint": self.endpoint,
            "chunk_size": self.chunk_size,
            "retries": self.retries,
            "delay_before_retry": self.delay_before_retry,
            "chunk_timeout": self.chunk_timeout,
            "verify_ssl": self.verify_ssl,
        }
        if self.headers:
            data["headers"] = dict(self.headers)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Profile":
        """Create from dictionary."""
        headers = data.get("headers") or {}
        if not isinstance(headers, dict):
            raise ConfigurationError("headers must be a mapping", field="headers", value=headers)
        return cls(
            endpoint=data.get("endpoint", ""),
            headers={str(k): str(v) for k, v in headers.items()},
            chunk_size=data.get("chunk_size", DEFAULT_CHUNK_SIZE_MB),
            retries=data.get("retries", DEFAULT_RETRIES),
            delay_before_retry=data.get("delay_before_retry", DEFAULT_DELAY_BEFORE_RETRY),
            chunk_timeout=data.get("chunk_timeout", DEFAULT_CHUNK_TIMEOUT_MS),
            verify_ssl=data.get("verify_ssl", True),
        )


# =============================================================================
# Config
# =============================================================================


def _env_number(name: str, convert: type) -> Any:
    raw = os.getenv(name)
    if raw is None:
        return None
    try:
        return convert(raw)
    except ValueError as e:
        raise ConfigurationError(f"Invalid value for {name}", field=name, value=raw) from e


@dataclass
class Config:
    """Application configuration."""

    default_profile: str = "default"
    profiles: dict[str, Profile] = field(default_factory=dict)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Config":
        """Load config from file with environment variable overrides.

        Priority (highest to lowest):
        1. Environment variables
        2. Config file
        3. Defaults

        Args:
            config_path: Optional path to config file.

        Returns:
            Loaded configuration.

        Raises:
            ConfigurationError: If the file or an override is malformed.
        """
        path = config_path or CONFIG_FILE
        config = cls()

        if path.exists():
            try:
                with open(path) as f:
                    data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise ConfigurationError(f"Failed to load config: {e}") from e

            if not isinstance(data, dict):
                raise ConfigurationError(f"Failed to load config: {path} is not a mapping")

            config.default_profile = data.get("default_profile", "default")
            for name, pdata in (data.get("profiles") or {}).items():
                config.profiles[name] = Profile.from_dict(pdata or {})

        if profile := os.getenv(ENV_PROFILE):
            config.default_profile = profile

        if endpoint := os.getenv(ENV_ENDPOINT):
            existing = config.profiles.get(config.default_profile)
            if existing is not None:
                existing.endpoint = endpoint
            else:
                config.profiles[config.default_profile] = Profile(endpoint=endpoint)

        active = config.profiles.get(config.default_profile)
        if active is not None:
            chunk_size = _env_number(ENV_CHUNK_SIZE, float)
            if chunk_size is not None:
                active.chunk_size = chunk_size
            retries = _env_number(ENV_RETRIES, int)
            if retries is not None:
                active.retries = retries
            if (verify := os.getenv(ENV_VERIFY_SSL)) is not None:
                active.verify_ssl = verify.lower() in ("true", "1", "yes")

        return config

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save config to file.

        Args:
            config_path: Optional path to config file.
        """
        path = config_path or CONFIG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "default_profile": self.default_profile,
            "profiles": {name: p.to_dict() for name, p in self.profiles.items()},
        }

        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    def get_profile(self, name: Optional[str] = None) -> Profile:
        """Get profile by name or default.

        Raises:
            ProfileNotFoundError: If profile doesn't exist.
        """
        name = name or self.default_profile
        if name not in self.profiles:
            raise ProfileNotFoundError(name)
        return self.profiles[name]

    def has_profile(self, name: str) -> bool:
        """Check if profile exists."""
        return name in self.profiles

    def add_profile(self, name: str, endpoint: str, **settings: Any) -> Profile:
        """Add or update a profile.

        Args:
            name: Profile name.
            endpoint: Upload endpoint URL.
            **settings: Other ``Profile`` fields.

        Returns:
            Created profile.
        """
        profile = Profile(endpoint=endpoint, **settings)
        self.profiles[name] = profile
        return profile
