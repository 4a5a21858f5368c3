"""Display resource cache with content-addressed reuse and deferred revocation.

Consumers (one per open attachment viewer) each own a slot. A slot receives
byte input over time; for every input the cache canonicalizes, signs and
validates the bytes and hands back a host display resource, a validation
error, or a "cannot display" error.

Reuse is content-addressed: if new input has the same signature (and
content type) as the slot's current entry, nothing is recomputed and the
existing resource or error is returned as-is. Two distinct buffers with the
same content are the same entry, and slots showing the same content share
one host resource.

Revocation is deferred. Rendering surfaces read handles asynchronously, so a
resource nobody holds any more is only revoked after a fixed grace delay.
Each schedule is a PendingRevocation with a monotonic deadline and a
cancellation token; requesting the same content before the deadline cancels
it and reuses the resource. The deadline is never extended. Due revocations
run when sweep() is called (see RevocationSweeper).

Slot state machine:
    EMPTY    - no usable bytes; no resource, no computed signature
    ACTIVE   - validated and backed by a live resource
    ERROR    - validation or resource creation failed; signature kept so
               identical input is not re-validated
    RELEASED - the owning consumer went away; its resource is scheduled for
               deferred revocation
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from uuid import uuid4

import structlog

from attachment_core.application.ports.display_host import DisplayHostProtocol
from attachment_core.application.ports.time_authority import TimeAuthorityProtocol
from attachment_core.application.services.base import LoggingMixin
from attachment_core.config.attachment_config import (
    DEFAULT_DISPLAY_CACHE_CONFIG,
    PDF_DOCUMENT_FORMAT,
    DisplayCacheConfig,
    DocumentFormatConfig,
)
from attachment_core.domain.errors.display import (
    DisplayCacheClosedError,
    UnknownSlotError,
)
from attachment_core.domain.models.content_signature import (
    EMPTY_SIGNATURE,
    ContentSignature,
)
from attachment_core.domain.models.display_resource import (
    DisplayResource,
    PendingRevocation,
    ResourceState,
)
from attachment_core.domain.services.byte_canonicalizer import canonicalize_bytes
from attachment_core.domain.services.signature_engine import compute_signature
from attachment_core.domain.services.structural_validator import StructuralValidator
from attachment_core.domain.services.wire_decoder import normalize_string
from attachment_core.infrastructure.monitoring.display_metrics import (
    DisplayCacheMetrics,
)

# Error code for host platform failures during resource creation
RESOURCE_CREATION_FAILED = "resource-creation-failed"

_CREATION_FAILED_MESSAGE = "Failed to create document preview"


class SlotState(str, Enum):
    """Steady states of a consumer slot."""

    EMPTY = "empty"
    ACTIVE = "active"
    ERROR = "error"
    RELEASED = "released"


class DisplayOutcome(str, Enum):
    """What rendering code should show for a request.

    The three failure-ish outcomes are kept distinct end-to-end: there is no
    document, the document is invalid, or it is valid but the platform could
    not display it.
    """

    NO_DOCUMENT = "no_document"
    INVALID_DOCUMENT = "invalid_document"
    DISPLAY_FAILED = "display_failed"
    READY = "ready"


@dataclass(frozen=True)
class DisplayResult:
    """Answer to a display request.

    Attributes:
        outcome: Which of the four outcomes applies.
        signature: Content signature (or sentinel) of the requested bytes.
        resource: Borrowed display resource when outcome is READY.
        error: Reason code when invalid or when creation failed.
        message: Human-readable explanation matching error.
    """

    outcome: DisplayOutcome
    signature: ContentSignature
    resource: DisplayResource | None = None
    error: str | None = None
    message: str | None = None

    @property
    def handle(self) -> str | None:
        """Handle of the borrowed resource, if any."""
        return self.resource.handle if self.resource is not None else None

    @property
    def is_ready(self) -> bool:
        return self.outcome is DisplayOutcome.READY


@dataclass(frozen=True)
class _ResourceKey:
    signature: ContentSignature
    content_type: str


@dataclass
class _CacheEntry:
    resource: DisplayResource
    holders: set[str] = field(default_factory=set)
    pending: PendingRevocation | None = None


@dataclass
class _SlotRecord:
    slot_id: str
    label: str | None
    state: SlotState = SlotState.EMPTY
    key: _ResourceKey | None = None
    result: DisplayResult | None = None
    holds_resource: bool = False


class DisplaySlot:
    """Consumer-facing view of one slot.

    Example:
        >>> with cache.open_slot("status-viewer") as slot:
        ...     result = slot.request(attachment.data, attachment.content_type)
        ...     if result.is_ready:
        ...         render(result.handle)
    """

    def __init__(self, cache: DisplayResourceCache, record: _SlotRecord) -> None:
        self._cache = cache
        self._record = record

    @property
    def slot_id(self) -> str:
        return self._record.slot_id

    @property
    def label(self) -> str | None:
        return self._record.label

    @property
    def state(self) -> SlotState:
        return self._record.state

    @property
    def signature(self) -> ContentSignature | None:
        """Signature of the slot's current input, if any was computed."""
        return self._record.key.signature if self._record.key is not None else None

    @property
    def current(self) -> DisplayResult | None:
        """Result of the slot's most recent request."""
        return self._record.result

    def request(self, data: Any, content_type: str | None = None) -> DisplayResult:
        """Request a display resource for new input. See DisplayResourceCache.request."""
        return self._cache.request(self.slot_id, data, content_type)

    def release(self) -> None:
        """Tear down the slot. See DisplayResourceCache.release."""
        self._cache.release(self.slot_id)

    def __enter__(self) -> DisplaySlot:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __repr__(self) -> str:
        return f"DisplaySlot(slot_id={self.slot_id!r}, state={self.state.value!r})"


class DisplayResourceCache(LoggingMixin):
    """Owns display resources keyed by content signature.

    The cache is an explicitly owned object: construct one per host
    environment (tests construct one per case) and close() it when done.
    close() revokes every resource immediately.

    All public methods are serialized by a re-entrant lock, so lookup and
    insert into the signature map are safe from multiple threads. Each slot
    should still have a single writer.

    Attributes:
        _entries: Signature/content-type -> live resource with its holders.
        _slots: Open slots by id.
    """

    def __init__(
        self,
        host: DisplayHostProtocol,
        time_authority: TimeAuthorityProtocol,
        *,
        config: DisplayCacheConfig = DEFAULT_DISPLAY_CACHE_CONFIG,
        document_format: DocumentFormatConfig = PDF_DOCUMENT_FORMAT,
        validator: StructuralValidator | None = None,
        metrics: DisplayCacheMetrics | None = None,
    ) -> None:
        """Initialize the cache.

        Args:
            host: Host platform resource store.
            time_authority: Clock used for revocation deadlines.
            config: Grace delay and related settings.
            document_format: Supplies the default content type.
            validator: Structural validator (built from document_format if None).
            metrics: Metrics collector (a private one is created if None).
        """
        self._host = host
        self._time = time_authority
        self._config = config
        self._format = document_format
        self._validator = validator or StructuralValidator(document_format)
        self._metrics = metrics or DisplayCacheMetrics()
        self._entries: dict[_ResourceKey, _CacheEntry] = {}
        self._slots: dict[str, _SlotRecord] = {}
        self._lock = threading.RLock()
        self._closed = False
        self._init_logger()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def __enter__(self) -> DisplayResourceCache:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def config(self) -> DisplayCacheConfig:
        return self._config

    @property
    def metrics(self) -> DisplayCacheMetrics:
        return self._metrics

    def close(self) -> None:
        """Revoke every resource immediately and release every slot.

        Idempotent. Any use other than sweep()/release() afterwards raises
        DisplayCacheClosedError.
        """
        with self._lock:
            if self._closed:
                return
            log = self._log_operation("close")
            revoked = 0
            for key, entry in list(self._entries.items()):
                if entry.pending is not None:
                    entry.pending.token.cancel()
                self._revoke(key, entry, log)
                revoked += 1
            for record in self._slots.values():
                record.state = SlotState.RELEASED
                record.holds_resource = False
            self._slots.clear()
            self._closed = True
            log.info("display_cache_closed", revoked=revoked)

    # =========================================================================
    # Slots
    # =========================================================================

    def open_slot(self, label: str | None = None) -> DisplaySlot:
        """Open a slot for one consumer instance.

        Args:
            label: Optional name for logs (e.g. the viewer it backs).

        Returns:
            DisplaySlot handle.
        """
        with self._lock:
            self._ensure_open()
            record = _SlotRecord(slot_id=str(uuid4()), label=label)
            self._slots[record.slot_id] = record
            self._log.debug("display_slot_opened", slot_id=record.slot_id, label=label)
            return DisplaySlot(self, record)

    def release(self, slot_id: str) -> None:
        """Tear down a slot.

        Its resource (if any) is scheduled for deferred revocation; pending
        revocations fire normally on later sweeps. Releasing an unknown or
        already released slot is a no-op.

        Args:
            slot_id: Slot to release.
        """
        with self._lock:
            record = self._slots.pop(slot_id, None)
            if record is None:
                self._log.debug("display_slot_release_ignored", slot_id=slot_id)
                return
            log = self._log_operation("release", slot_id=slot_id)
            self._detach(record, log)
            record.state = SlotState.RELEASED
            log.debug("display_slot_released", label=record.label)

    def request(
        self,
        slot_id: str,
        data: Any,
        content_type: str | None = None,
    ) -> DisplayResult:
        """Request a display resource for a slot's new input.

        Args:
            slot_id: Slot receiving the input.
            data: Canonical bytes or any accepted byte encoding; None or
                empty means "no document".
            content_type: MIME type to bind; blank means the document type.

        Returns:
            DisplayResult. Malformed input never raises.

        Raises:
            UnknownSlotError: If the slot was never opened or is released.
            DisplayCacheClosedError: If the cache is closed.
        """
        with self._lock:
            self._ensure_open()
            record = self._slots.get(slot_id)
            if record is None:
                raise UnknownSlotError(slot_id)
            log = self._log_operation("request", slot_id=slot_id)
            result = self._request_locked(record, data, content_type, log)
            self._metrics.requests_total.labels(outcome=result.outcome.value).inc()
            return result

    def acquire_transient(
        self,
        data: Any,
        content_type: str | None = None,
        *,
        strict: bool = True,
    ) -> DisplayResult:
        """Create (or reuse) a resource for a one-shot consumer.

        Used for "open in a new view" and "download" actions: no slot holds
        the resource, so its deferred revocation is scheduled immediately
        and the consumer has the grace delay to read it.

        Args:
            data: Canonical bytes or any accepted byte encoding.
            content_type: MIME type to bind; blank means the document type.
            strict: When False, structural validation is skipped (the
                "download the raw file anyway" path).

        Returns:
            DisplayResult.
        """
        with self._lock:
            self._ensure_open()
            log = self._log_operation("acquire_transient", strict=strict)

            canonical = canonicalize_bytes(data)
            if canonical is None:
                signature = EMPTY_SIGNATURE if data is None else compute_signature(data)
                return DisplayResult(DisplayOutcome.NO_DOCUMENT, signature)

            key = _ResourceKey(compute_signature(canonical), self._content_type(content_type))

            if strict:
                verdict = self._validator.validate(canonical)
                if not verdict.valid:
                    log.info(
                        "display_validation_failed",
                        signature=key.signature,
                        reason=verdict.reason.value if verdict.reason else None,
                    )
                    return DisplayResult(
                        DisplayOutcome.INVALID_DOCUMENT,
                        key.signature,
                        error=verdict.reason.value if verdict.reason else None,
                        message=verdict.message,
                    )

            try:
                entry = self._acquire(key, canonical, log)
            except Exception as e:
                return self._creation_failed(key, e, log)

            if not entry.holders:
                entry.resource.state = ResourceState.ACTIVE
                self._schedule_revocation(entry, log)
            return DisplayResult(DisplayOutcome.READY, key.signature, resource=entry.resource)

    # =========================================================================
    # Revocation
    # =========================================================================

    def sweep(self) -> int:
        """Revoke every resource whose grace delay has elapsed.

        Returns:
            Number of resources revoked.
        """
        with self._lock:
            if self._closed:
                return 0
            now = self._time.monotonic()
            due = [
                (key, entry)
                for key, entry in self._entries.items()
                if entry.pending is not None and entry.pending.is_due(now)
            ]
            if not due:
                return 0
            log = self._log_operation("sweep")
            for key, entry in due:
                self._revoke(key, entry, log)
            return len(due)

    def next_deadline(self) -> float | None:
        """Earliest pending revocation deadline, or None."""
        with self._lock:
            deadlines = [
                entry.pending.deadline
                for entry in self._entries.values()
                if entry.pending is not None and not entry.pending.token.cancelled
            ]
            return min(deadlines) if deadlines else None

    # =========================================================================
    # Inspection
    # =========================================================================

    @property
    def pending_revocations(self) -> int:
        with self._lock:
            return sum(1 for entry in self._entries.values() if entry.pending is not None)

    @property
    def resource_count(self) -> int:
        with self._lock:
            return len(self._entries)

    @property
    def slot_count(self) -> int:
        with self._lock:
            return len(self._slots)

    def get_resource(
        self,
        signature: ContentSignature,
        content_type: str | None = None,
    ) -> DisplayResource | None:
        """Look up the live resource for a signature.

        Args:
            signature: Content signature.
            content_type: MIME type it was bound with; blank means the
                document type.

        Returns:
            The resource, or None when nothing live matches.
        """
        with self._lock:
            entry = self._entries.get(
                _ResourceKey(signature, self._content_type(content_type))
            )
            return entry.resource if entry is not None else None

    # =========================================================================
    # Internals (lock held)
    # =========================================================================

    def _ensure_open(self) -> None:
        if self._closed:
            raise DisplayCacheClosedError()

    def _content_type(self, content_type: str | None) -> str:
        return normalize_string(content_type) or self._format.mime_type

    def _request_locked(
        self,
        record: _SlotRecord,
        data: Any,
        content_type: str | None,
        log: structlog.BoundLogger,
    ) -> DisplayResult:
        canonical = canonicalize_bytes(data)
        if canonical is None:
            signature = EMPTY_SIGNATURE if data is None else compute_signature(data)
            if signature != EMPTY_SIGNATURE:
                log.warning(
                    "display_input_not_canonicalizable",
                    type_name=type(data).__name__,
                    signature=signature,
                )
            self._detach(record, log)
            return self._settle(
                record,
                SlotState.EMPTY,
                None,
                DisplayResult(DisplayOutcome.NO_DOCUMENT, signature),
            )

        key = _ResourceKey(compute_signature(canonical), self._content_type(content_type))

        if (
            record.key == key
            and record.result is not None
            and record.state in (SlotState.ACTIVE, SlotState.ERROR)
        ):
            self._metrics.cache_hits_total.inc()
            log.debug(
                "display_slot_reused",
                signature=key.signature,
                state=record.state.value,
            )
            return record.result

        verdict = self._validator.validate(canonical)
        if not verdict.valid:
            reason = verdict.reason.value if verdict.reason else None
            log.info(
                "display_validation_failed",
                signature=key.signature,
                reason=reason,
                size=len(canonical),
            )
            self._detach(record, log)
            return self._settle(
                record,
                SlotState.ERROR,
                key,
                DisplayResult(
                    DisplayOutcome.INVALID_DOCUMENT,
                    key.signature,
                    error=reason,
                    message=verdict.message,
                ),
            )

        try:
            entry = self._acquire(key, canonical, log)
        except Exception as e:
            self._detach(record, log)
            return self._settle(
                record, SlotState.ERROR, key, self._creation_failed(key, e, log)
            )

        self._detach(record, log)
        entry.holders.add(record.slot_id)
        entry.resource.state = ResourceState.ACTIVE
        record.holds_resource = True
        return self._settle(
            record,
            SlotState.ACTIVE,
            key,
            DisplayResult(DisplayOutcome.READY, key.signature, resource=entry.resource),
        )

    def _settle(
        self,
        record: _SlotRecord,
        state: SlotState,
        key: _ResourceKey | None,
        result: DisplayResult,
    ) -> DisplayResult:
        record.state = state
        record.key = key
        record.result = result
        return result

    def _acquire(
        self,
        key: _ResourceKey,
        canonical: bytes,
        log: structlog.BoundLogger,
    ) -> _CacheEntry:
        entry = self._entries.get(key)
        if entry is not None:
            if entry.pending is not None:
                entry.pending.token.cancel()
                entry.pending = None
                self._metrics.revocations_cancelled_total.inc()
                log.info(
                    "display_revocation_cancelled",
                    signature=key.signature,
                    handle=entry.resource.handle,
                )
            return entry

        handle = self._host.create_resource(canonical, key.content_type)
        resource = DisplayResource(
            handle=handle,
            signature=key.signature,
            content_type=key.content_type,
            size=len(canonical),
            created_at=self._time.monotonic(),
        )
        entry = _CacheEntry(resource=resource)
        self._entries[key] = entry
        self._metrics.resources_created_total.inc()
        self._metrics.live_resources.set(len(self._entries))
        log.info(
            "display_resource_created",
            signature=key.signature,
            content_type=key.content_type,
            size=resource.size,
            handle=handle,
        )
        return entry

    def _creation_failed(
        self,
        key: _ResourceKey,
        error: BaseException,
        log: structlog.BoundLogger,
    ) -> DisplayResult:
        self._metrics.resource_creation_failures_total.inc()
        log.error(
            "display_resource_creation_failed",
            signature=key.signature,
            error=str(error),
            error_type=type(error).__name__,
        )
        return DisplayResult(
            DisplayOutcome.DISPLAY_FAILED,
            key.signature,
            error=RESOURCE_CREATION_FAILED,
            message=str(error) or _CREATION_FAILED_MESSAGE,
        )

    def _detach(self, record: _SlotRecord, log: structlog.BoundLogger) -> None:
        if record.holds_resource and record.key is not None:
            entry = self._entries.get(record.key)
            if entry is not None:
                entry.holders.discard(record.slot_id)
                if not entry.holders:
                    self._schedule_revocation(entry, log)
        record.holds_resource = False

    def _schedule_revocation(
        self,
        entry: _CacheEntry,
        log: structlog.BoundLogger,
    ) -> None:
        if entry.pending is not None:
            return
        deadline = self._time.monotonic() + self._config.grace_delay_seconds
        entry.pending = PendingRevocation(deadline=deadline)
        entry.resource.state = ResourceState.PENDING_REVOCATION
        self._metrics.revocations_scheduled_total.inc()
        log.debug(
            "display_revocation_scheduled",
            signature=entry.resource.signature,
            handle=entry.resource.handle,
            deadline=deadline,
        )

    def _revoke(
        self,
        key: _ResourceKey,
        entry: _CacheEntry,
        log: structlog.BoundLogger,
    ) -> None:
        del self._entries[key]
        entry.pending = None
        entry.holders.clear()
        entry.resource.state = ResourceState.REVOKED
        try:
            self._host.revoke_resource(entry.resource.handle)
        except Exception as e:
            log.warning(
                "display_resource_revoke_failed",
                signature=key.signature,
                handle=entry.resource.handle,
                error=str(e),
                error_type=type(e).__name__,
            )
        self._metrics.revocations_completed_total.inc()
        self._metrics.live_resources.set(len(self._entries))
        log.info(
            "display_resource_revoked",
            signature=key.signature,
            handle=entry.resource.handle,
        )
