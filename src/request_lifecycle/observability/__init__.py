# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Observability for the request lifecycle library.

Classes:
    LifecycleMetrics: Thread-safe counters for guards and uploads.
    PrometheusLifecycleMetrics: Optional Prometheus counters.

Functions:
    get_default_metrics: Process-wide LifecycleMetrics instance.
    get_prometheus_lifecycle_metrics: Get or create the Prometheus singleton.
    reset_prometheus_lifecycle_metrics: Reset the Prometheus singleton.

Constants:
    PROMETHEUS_AVAILABLE: Whether prometheus_client is available.
"""

from .metrics import (
    PROMETHEUS_AVAILABLE,
    LifecycleMetrics,
    PrometheusLifecycleMetrics,
    get_default_metrics,
    get_prometheus_lifecycle_metrics,
    reset_prometheus_lifecycle_metrics,
    resolve_metrics,
)

__all__ = [
    "PROMETHEUS_AVAILABLE",
    "LifecycleMetrics",
    "PrometheusLifecycleMetrics",
    "get_default_metrics",
    "get_prometheus_lifecycle_metrics",
    "reset_prometheus_lifecycle_metrics",
    "resolve_metrics",
]
