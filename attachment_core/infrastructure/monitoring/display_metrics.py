"""Prometheus metrics for the display resource cache.

Operational counters only: request outcomes, reuse, and the resource
lifecycle (created, failed, scheduled/cancelled/completed revocations).
Each collector owns its registry so tests and multiple caches stay isolated.
"""

from prometheus_client import CollectorRegistry, Counter, Gauge, generate_latest

# Content type for Prometheus exposition
METRICS_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"


class DisplayCacheMetrics:
    """Collects display resource cache metrics.

    Attributes:
        requests_total: Requests by outcome.
        cache_hits_total: Requests answered from the slot's current entry.
        resources_created_total: Host resources created.
        resource_creation_failures_total: Host creation failures.
        revocations_scheduled_total: Deferred revocations scheduled.
        revocations_cancelled_total: Deferred revocations cancelled by reuse.
        revocations_completed_total: Resources actually revoked.
        live_resources: Resources currently held by the cache.
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics.

        Args:
            registry: Optional custom registry for testing isolation.
        """
        self._registry = registry or CollectorRegistry()

        self.requests_total = Counter(
            name="attachment_display_requests_total",
            documentation="Display resource requests by outcome",
            labelnames=["outcome"],
            registry=self._registry,
        )
        self.cache_hits_total = Counter(
            name="attachment_display_cache_hits_total",
            documentation="Requests whose content signature matched the slot's current entry",
            registry=self._registry,
        )
        self.resources_created_total = Counter(
            name="attachment_display_resources_created_total",
            documentation="Display resources created on the host",
            registry=self._registry,
        )
        self.resource_creation_failures_total = Counter(
            name="attachment_display_resource_creation_failures_total",
            documentation="Host failures while creating display resources",
            registry=self._registry,
        )
        self.revocations_scheduled_total = Counter(
            name="attachment_display_revocations_scheduled_total",
            documentation="Deferred revocations scheduled",
            registry=self._registry,
        )
        self.revocations_cancelled_total = Counter(
            name="attachment_display_revocations_cancelled_total",
            documentation="Deferred revocations cancelled because the content was requested again",
            registry=self._registry,
        )
        self.revocations_completed_total = Counter(
            name="attachment_display_revocations_completed_total",
            documentation="Display resources revoked on the host",
            registry=self._registry,
        )
        self.live_resources = Gauge(
            name="attachment_display_live_resources",
            documentation="Display resources currently held by the cache",
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        return self._registry

    def generate_latest(self) -> bytes:
        """Render metrics in Prometheus exposition format."""
        return generate_latest(self._registry)
