"""Unit tests for attachment configuration."""

import pytest

from attachment_core.config.attachment_config import (
    DEFAULT_DISPLAY_CACHE_CONFIG,
    PDF_DOCUMENT_FORMAT,
    TEST_DISPLAY_CACHE_CONFIG,
    DisplayCacheConfig,
    DocumentFormatConfig,
)


class TestDocumentFormatConfig:
    """Document format defaults and validation."""

    def test_pdf_defaults(self) -> None:
        assert PDF_DOCUMENT_FORMAT.header == b"%PDF-"
        assert PDF_DOCUMENT_FORMAT.trailer == b"%%EOF"
        assert PDF_DOCUMENT_FORMAT.trailer_window == 1024
        assert PDF_DOCUMENT_FORMAT.min_size == 100
        assert PDF_DOCUMENT_FORMAT.mime_type == "application/pdf"
        assert PDF_DOCUMENT_FORMAT.default_filename == "attachment.pdf"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"header": b""},
            {"trailer": b""},
            {"trailer_window": 4},
            {"min_size": 3},
            {"mime_type": " "},
            {"extension": "pdf"},
            {"default_basename": ""},
        ],
    )
    def test_invalid(self, kwargs: dict[str, object]) -> None:
        with pytest.raises(ValueError):
            DocumentFormatConfig(**kwargs)  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            PDF_DOCUMENT_FORMAT.min_size = 1  # type: ignore[misc]


class TestDisplayCacheConfig:
    """Cache config defaults, validation and environment overrides."""

    def test_defaults(self) -> None:
        assert DEFAULT_DISPLAY_CACHE_CONFIG.grace_delay_seconds == 10.0
        assert DEFAULT_DISPLAY_CACHE_CONFIG.sweep_interval_seconds == 1.0
        assert DEFAULT_DISPLAY_CACHE_CONFIG.max_resident_bytes == 64 * 1024 * 1024

    def test_test_config(self) -> None:
        assert TEST_DISPLAY_CACHE_CONFIG.grace_delay_seconds == 5.0

    def test_zero_grace_allowed(self) -> None:
        assert DisplayCacheConfig(grace_delay_seconds=0).grace_delay_seconds == 0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"grace_delay_seconds": -1},
            {"sweep_interval_seconds": 0},
            {"max_resident_bytes": 0},
        ],
    )
    def test_invalid(self, kwargs: dict[str, object]) -> None:
        with pytest.raises(ValueError):
            DisplayCacheConfig(**kwargs)  # type: ignore[arg-type]

    def test_from_environment_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in (
            "ATTACHMENT_GRACE_DELAY_SECONDS",
            "ATTACHMENT_SWEEP_INTERVAL_SECONDS",
            "ATTACHMENT_MAX_RESIDENT_BYTES",
        ):
            monkeypatch.delenv(key, raising=False)
        assert DisplayCacheConfig.from_environment() == DEFAULT_DISPLAY_CACHE_CONFIG

    def test_from_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ATTACHMENT_GRACE_DELAY_SECONDS", "2.5")
        monkeypatch.setenv("ATTACHMENT_SWEEP_INTERVAL_SECONDS", "0.5")
        monkeypatch.setenv("ATTACHMENT_MAX_RESIDENT_BYTES", "4096")
        config = DisplayCacheConfig.from_environment()
        assert config.grace_delay_seconds == 2.5
        assert config.sweep_interval_seconds == 0.5
        assert config.max_resident_bytes == 4096

    def test_from_environment_ignores_garbage(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ATTACHMENT_GRACE_DELAY_SECONDS", "soon")
        monkeypatch.setenv("ATTACHMENT_MAX_RESIDENT_BYTES", "lots")
        config = DisplayCacheConfig.from_environment()
        assert config.grace_delay_seconds == 10.0
        assert config.max_resident_bytes == 64 * 1024 * 1024
