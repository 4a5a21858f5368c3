"""Attachment document and display cache configuration.

This module defines the document signature the structural validator sniffs
for, and the timing/capacity knobs of the display resource cache, with
environment variable overrides for deployment tuning.

Environment Variables (Display Cache):
- ATTACHMENT_GRACE_DELAY_SECONDS: Wait before revoking an unneeded resource (default: 10.0)
- ATTACHMENT_SWEEP_INTERVAL_SECONDS: Revocation sweeper period (default: 1.0)
- ATTACHMENT_MAX_RESIDENT_BYTES: In-memory host capacity (default: 64 MiB)
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_float_env(key: str, default: float) -> float:
    """Get float environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed float value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class DocumentFormatConfig:
    """Signature of the single binary document kind the core accepts.

    Attributes:
        header: Magic bytes every document starts with.
        trailer: End marker searched near the end of the document.
        trailer_window: How many trailing bytes are scanned for the trailer.
        min_size: Smallest byte length that can hold a minimal document.
        mime_type: Content type used when the wire leaves it blank.
        extension: Filename suffix every attachment is forced to carry.
        default_basename: Filename stem used when the wire has none.
    """

    header: bytes = b"%PDF-"
    trailer: bytes = b"%%EOF"
    trailer_window: int = 1024
    min_size: int = 100
    mime_type: str = "application/pdf"
    extension: str = ".pdf"
    default_basename: str = "attachment"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.header:
            raise ValueError("header must be non-empty")
        if not self.trailer:
            raise ValueError("trailer must be non-empty")
        if self.trailer_window < len(self.trailer):
            raise ValueError(
                f"trailer_window ({self.trailer_window}) must fit the trailer "
                f"({len(self.trailer)} bytes)"
            )
        if self.min_size < len(self.header):
            raise ValueError(
                f"min_size ({self.min_size}) must be at least the header length "
                f"({len(self.header)})"
            )
        if not self.mime_type.strip():
            raise ValueError("mime_type must be non-empty")
        if not self.extension.startswith("."):
            raise ValueError(f"extension must start with '.', got {self.extension!r}")
        if not self.default_basename.strip():
            raise ValueError("default_basename must be non-empty")

    @property
    def default_filename(self) -> str:
        """Filename used when the wire record carries none."""
        return f"{self.default_basename}{self.extension}"


PDF_DOCUMENT_FORMAT = DocumentFormatConfig()


@dataclass(frozen=True)
class DisplayCacheConfig:
    """Configuration for the display resource cache.

    Attributes:
        grace_delay_seconds: How long an unneeded resource stays alive before
            revocation, protecting rendering surfaces that still read it.
            Default: 10 seconds.
        sweep_interval_seconds: Period of the background revocation sweeper.
            Default: 1 second.
        max_resident_bytes: Capacity of the in-memory display host.
            Default: 64 MiB.
    """

    grace_delay_seconds: float = 10.0
    sweep_interval_seconds: float = 1.0
    max_resident_bytes: int = 64 * 1024 * 1024

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.grace_delay_seconds < 0:
            raise ValueError(
                f"grace_delay_seconds must be non-negative, got {self.grace_delay_seconds}"
            )
        if self.sweep_interval_seconds <= 0:
            raise ValueError(
                f"sweep_interval_seconds must be positive, got {self.sweep_interval_seconds}"
            )
        if self.max_resident_bytes < 1:
            raise ValueError(
                f"max_resident_bytes must be positive, got {self.max_resident_bytes}"
            )

    @classmethod
    def from_environment(cls) -> "DisplayCacheConfig":
        """Create config from environment variables with defaults.

        Environment Variables:
            ATTACHMENT_GRACE_DELAY_SECONDS: Grace delay (default: 10.0)
            ATTACHMENT_SWEEP_INTERVAL_SECONDS: Sweep period (default: 1.0)
            ATTACHMENT_MAX_RESIDENT_BYTES: Host capacity (default: 67108864)

        Returns:
            DisplayCacheConfig with values from environment or defaults.
        """
        return cls(
            grace_delay_seconds=_get_float_env("ATTACHMENT_GRACE_DELAY_SECONDS", 10.0),
            sweep_interval_seconds=_get_float_env(
                "ATTACHMENT_SWEEP_INTERVAL_SECONDS", 1.0
            ),
            max_resident_bytes=_get_int_env(
                "ATTACHMENT_MAX_RESIDENT_BYTES", 64 * 1024 * 1024
            ),
        )


# Default production config
DEFAULT_DISPLAY_CACHE_CONFIG = DisplayCacheConfig()

# Testing config with a short grace delay and a small host
TEST_DISPLAY_CACHE_CONFIG = DisplayCacheConfig(
    grace_delay_seconds=5.0,
    sweep_interval_seconds=0.01,
    max_resident_bytes=1024 * 1024,
)
