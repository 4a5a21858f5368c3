"""Tests to verify hexagonal architecture structure."""

from pathlib import Path

import pytest

# Compute project root relative to this test file
PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def package_path() -> Path:
    """Return the attachment_core package directory path."""
    return PROJECT_ROOT / "attachment_core"


def _import_lines(py_file: Path, prefix: str) -> list[str]:
    return [
        line.strip()
        for line in py_file.read_text().split("\n")
        if line.strip().startswith((f"from {prefix}", f"import {prefix}"))
    ]


def test_main_layers_exist(package_path: Path) -> None:
    """Verify all main layer directories exist."""
    layers = ["domain", "application", "infrastructure", "api", "config", "bootstrap"]
    for layer in layers:
        assert (package_path / layer).is_dir(), f"Missing layer: {layer}"
        assert (package_path / layer / "__init__.py").is_file(), (
            f"Missing {layer}/__init__.py"
        )


def test_domain_has_no_external_layer_imports(package_path: Path) -> None:
    """Verify domain layer imports nothing from application, infrastructure or api.

    Domain may read static configuration from attachment_core.config.
    """
    for py_file in (package_path / "domain").rglob("*.py"):
        for prefix in (
            "attachment_core.application",
            "attachment_core.infrastructure",
            "attachment_core.api",
            "attachment_core.bootstrap",
        ):
            lines = _import_lines(py_file, prefix)
            assert not lines, f"{py_file} contains forbidden import: {lines}"


def test_application_has_no_forbidden_imports(package_path: Path) -> None:
    """Verify application layer doesn't import from api or concrete adapters.

    Observability and monitoring are allowed as cross-cutting concerns.
    """
    allowed_infra_patterns = [
        "attachment_core.infrastructure.observability",
        "attachment_core.infrastructure.monitoring",
    ]

    for py_file in (package_path / "application").rglob("*.py"):
        assert not _import_lines(py_file, "attachment_core.api"), (
            f"{py_file} imports from the api layer"
        )
        lines_with_infra_import = [
            line
            for line in _import_lines(py_file, "attachment_core.infrastructure")
            if not any(pattern in line for pattern in allowed_infra_patterns)
        ]
        assert not lines_with_infra_import, (
            f"{py_file} contains forbidden infrastructure import "
            f"(observability/monitoring imports are allowed): {lines_with_infra_import}"
        )


def test_api_has_no_direct_infrastructure_imports(package_path: Path) -> None:
    """Verify api layer doesn't import infrastructure adapters directly."""
    for py_file in (package_path / "api").rglob("*.py"):
        lines = _import_lines(py_file, "attachment_core.infrastructure.adapters")
        assert not lines, f"{py_file} contains forbidden import: {lines}"


def test_attachment_core_error_importable_from_domain() -> None:
    """Verify AttachmentCoreError is exported from domain __init__."""
    from attachment_core.domain import AttachmentCoreError

    assert issubclass(AttachmentCoreError, Exception)


def test_attachment_core_error_accepts_message() -> None:
    """Verify AttachmentCoreError can be instantiated with a message."""
    from attachment_core.domain.exceptions import AttachmentCoreError

    error = AttachmentCoreError("test message")
    assert str(error) == "test message"

    error_default = AttachmentCoreError()
    assert str(error_default) == ""


def test_all_errors_share_base() -> None:
    """Verify every package error derives from AttachmentCoreError."""
    from attachment_core.domain import (
        AttachmentCoreError,
        DisplayCacheClosedError,
        DisplayHostError,
        InvalidAttachmentError,
        UnknownSlotError,
    )

    for error_type in (
        DisplayCacheClosedError,
        DisplayHostError,
        InvalidAttachmentError,
        UnknownSlotError,
    ):
        assert issubclass(error_type, AttachmentCoreError)
