"""Monitoring infrastructure (Prometheus metrics)."""

from attachment_core.infrastructure.monitoring.display_metrics import (
    METRICS_CONTENT_TYPE,
    DisplayCacheMetrics,
)

__all__ = ["DisplayCacheMetrics", "METRICS_CONTENT_TYPE"]
