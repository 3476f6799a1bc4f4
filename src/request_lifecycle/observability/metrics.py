# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Lifecycle and upload metrics for the request lifecycle library.

This module provides:
1. LifecycleMetrics - Dataclass of counters for guard and upload events
2. PrometheusLifecycleMetrics - Optional Prometheus counters for observability

The LifecycleMetrics class provides observability into:
- How many calls were bound to a lifecycle, and how they ended
- How many callback events were suppressed after a guard fired
- Upload completion and failure counts, and total bytes uploaded

Usage:
    metrics = LifecycleMetrics()
    metrics.record_bound()
    metrics.record_lifecycle_cancel()
    stats = metrics.get_stats()
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

logger = logging.getLogger(__name__)

# Type declarations for optional prometheus_client imports
if TYPE_CHECKING:
    from prometheus_client import Counter as CounterType
else:
    CounterType = object

# Try to import prometheus_client for optional Prometheus metrics
try:
    from prometheus_client import Counter as _Counter

    Counter: type[CounterType] | None = _Counter
    PROMETHEUS_AVAILABLE = True
except ImportError:
    Counter = None
    PROMETHEUS_AVAILABLE = False


@dataclass
class LifecycleMetrics:
    """
    Counters for lifecycle guards and progress-reporting uploads.

    Thread Safety:
        Upload counters are updated from I/O threads while guard counters are
        updated from the UI thread, so every update takes a threading.Lock.

    Example:
        >>> metrics = LifecycleMetrics()
        >>> metrics.record_upload_progress(100)
        >>> metrics.record_upload_done()
        >>> metrics.get_stats()["uploads_done"]
        1
    """

    # Guard lifecycle counters
    guards_bound: int = 0
    immediate_cancels: int = 0  # Owner already destroyed at bind time
    lifecycle_cancels: int = 0  # Owner destroyed while the call was in flight
    completions: int = 0
    suppressed_events: int = 0

    # Upload counters
    uploads_started: int = 0
    uploads_done: int = 0
    upload_failures: int = 0
    bytes_uploaded: int = 0

    # Optional Prometheus mirror, fed by the record_* methods
    prometheus: PrometheusLifecycleMetrics | None = field(default=None, repr=False)

    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def record_bound(self) -> None:
        with self._lock:
            self.guards_bound += 1

    def record_immediate_cancel(self) -> None:
        with self._lock:
            self.immediate_cancels += 1
        if self.prometheus:
            self.prometheus.observe_cancel("immediate")

    def record_lifecycle_cancel(self) -> None:
        with self._lock:
            self.lifecycle_cancels += 1
        if self.prometheus:
            self.prometheus.observe_cancel("destroyed")

    def record_completion(self) -> None:
        with self._lock:
            self.completions += 1

    def record_suppressed(self) -> None:
        """Record a callback event dropped because its guard already fired."""
        with self._lock:
            self.suppressed_events += 1
        if self.prometheus:
            self.prometheus.observe_suppressed()

    def record_upload_started(self) -> None:
        with self._lock:
            self.uploads_started += 1

    def record_upload_progress(self, byte_count: int) -> None:
        with self._lock:
            self.bytes_uploaded += byte_count
        if self.prometheus:
            self.prometheus.observe_upload_bytes(byte_count)

    def record_upload_done(self) -> None:
        with self._lock:
            self.uploads_done += 1
        if self.prometheus:
            self.prometheus.observe_upload("done")

    def record_upload_failure(self) -> None:
        with self._lock:
            self.upload_failures += 1
        if self.prometheus:
            self.prometheus.observe_upload("failed")

    def get_cancel_rate(self) -> float:
        """
        Fraction of bound calls that were cancelled by their lifecycle.

        Returns:
            A float between 0.0 and 1.0. Returns 0.0 if nothing was bound.
        """
        with self._lock:
            if self.guards_bound == 0:
                return 0.0
            return (self.immediate_cancels + self.lifecycle_cancels) / self.guards_bound

    def get_stats(self) -> dict[str, Any]:
        """
        Return metrics as a dictionary for JSON serialization.

        Returns:
            Dictionary containing all counters plus the derived cancel rate.
        """
        cancel_rate = self.get_cancel_rate()
        with self._lock:
            return {
                "guards_bound": self.guards_bound,
                "immediate_cancels": self.immediate_cancels,
                "lifecycle_cancels": self.lifecycle_cancels,
                "completions": self.completions,
                "suppressed_events": self.suppressed_events,
                "cancel_rate": cancel_rate,
                "uploads_started": self.uploads_started,
                "uploads_done": self.uploads_done,
                "upload_failures": self.upload_failures,
                "bytes_uploaded": self.bytes_uploaded,
            }

    def reset(self) -> None:
        """Reset all counters to zero."""
        with self._lock:
            self.guards_bound = 0
            self.immediate_cancels = 0
            self.lifecycle_cancels = 0
            self.completions = 0
            self.suppressed_events = 0
            self.uploads_started = 0
            self.uploads_done = 0
            self.upload_failures = 0
            self.bytes_uploaded = 0


class PrometheusLifecycleMetrics:
    """
    Prometheus counters mirroring LifecycleMetrics.

    Only available when prometheus_client is installed.

    Metrics:
        - request_lifecycle_guard_cancels_total: Cancels, labelled by reason
          (``immediate`` or ``destroyed``)
        - request_lifecycle_suppressed_events_total: Dropped callback events
        - request_lifecycle_upload_bytes_total: Bytes written by progress bodies
        - request_lifecycle_uploads_total: Finished uploads, labelled by outcome
    """

    def __init__(self, registry: Any | None = None) -> None:
        """
        Initialize Prometheus lifecycle metrics.

        Args:
            registry: Optional CollectorRegistry. If None, uses the default registry.

        Raises:
            ImportError: If prometheus_client is not available.
        """
        if not PROMETHEUS_AVAILABLE or Counter is None:
            raise ImportError(
                "prometheus_client is not available. "
                "Install with: pip install prometheus-client"
            )

        self.guard_cancels = Counter(
            "request_lifecycle_guard_cancels_total",
            "Calls cancelled because their lifecycle owner was destroyed",
            ["reason"],
            registry=registry,
        )
        self.suppressed_events = Counter(
            "request_lifecycle_suppressed_events_total",
            "Callback events dropped after the guard fired",
            registry=registry,
        )
        self.upload_bytes = Counter(
            "request_lifecycle_upload_bytes_total",
            "Bytes written through progress-reporting bodies",
            registry=registry,
        )
        self.uploads = Counter(
            "request_lifecycle_uploads_total",
            "Finished uploads",
            ["outcome"],  # Values: done, failed
            registry=registry,
        )

        logger.info("Prometheus lifecycle metrics initialized")

    def observe_cancel(self, reason: str) -> None:
        self.guard_cancels.labels(reason=reason).inc()

    def observe_suppressed(self) -> None:
        self.suppressed_events.inc()

    def observe_upload_bytes(self, byte_count: int) -> None:
        self.upload_bytes.inc(byte_count)

    def observe_upload(self, outcome: str) -> None:
        self.uploads.labels(outcome=outcome).inc()


_default_metrics = LifecycleMetrics()

# Module-level singleton for Prometheus metrics (optional)
_prometheus_metrics: PrometheusLifecycleMetrics | None = None
_prometheus_lock = threading.Lock()


def get_default_metrics() -> LifecycleMetrics:
    """
    Return the process-wide LifecycleMetrics instance.

    The Prometheus mirror is attached on first use when prometheus_client
    is installed.
    """
    if _default_metrics.prometheus is None and PROMETHEUS_AVAILABLE:
        _default_metrics.prometheus = get_prometheus_lifecycle_metrics()
    return _default_metrics


def resolve_metrics(metrics: LifecycleMetrics | None) -> LifecycleMetrics | None:
    """
    Pick the metrics sink for a component.

    An explicit instance wins; otherwise the process-wide instance is used
    when ``metrics_enabled`` is set in the config.
    """
    if metrics is not None:
        return metrics
    from ..config import get_config

    if get_config().metrics_enabled:
        return get_default_metrics()
    return None


def get_prometheus_lifecycle_metrics() -> PrometheusLifecycleMetrics | None:
    """
    Get or create the Prometheus lifecycle metrics singleton.

    Uses double-checked locking so concurrent first calls cannot register
    the same collectors twice.

    Returns:
        PrometheusLifecycleMetrics instance if prometheus_client is available,
        None otherwise.
    """
    global _prometheus_metrics

    if not PROMETHEUS_AVAILABLE:
        return None

    if _prometheus_metrics is None:
        with _prometheus_lock:
            if _prometheus_metrics is None:
                try:
                    _prometheus_metrics = PrometheusLifecycleMetrics()
                except Exception as e:
                    logger.warning(
                        f"Failed to initialize Prometheus lifecycle metrics: {e}"
                    )
                    return None

    return _prometheus_metrics


def reset_prometheus_lifecycle_metrics() -> None:
    """Reset the Prometheus lifecycle metrics singleton (mainly for testing)."""
    global _prometheus_metrics
    _prometheus_metrics = None


__all__ = [
    "PROMETHEUS_AVAILABLE",
    "LifecycleMetrics",
    "PrometheusLifecycleMetrics",
    "get_default_metrics",
    "get_prometheus_lifecycle_metrics",
    "reset_prometheus_lifecycle_metrics",
    "resolve_metrics",
]
