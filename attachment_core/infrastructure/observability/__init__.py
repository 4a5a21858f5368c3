"""Observability infrastructure: structured logging and correlation.

Usage:
    from attachment_core.infrastructure.observability import (
        configure_structlog,
        get_correlation_id,
        set_correlation_id,
    )
"""

from attachment_core.infrastructure.observability.correlation import (
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from attachment_core.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_service,
)

__all__: list[str] = [
    "configure_structlog",
    "correlation_id_processor",
    "generate_correlation_id",
    "get_correlation_id",
    "get_logger_for_service",
    "set_correlation_id",
]
