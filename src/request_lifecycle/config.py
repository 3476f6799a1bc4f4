# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Configuration for the request lifecycle library.

A single process-wide RequestLifecycleConfig supplies the defaults used by
guards, progress bodies and the transport adapter. Components accept explicit
overrides; anything left as None falls back to this config.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass

from .exceptions import ConfigurationError


@dataclass
class RequestLifecycleConfig:
    """
    Process-wide defaults for guards, progress bodies and transports.
    """

    # === Thread Confinement ===

    enforce_thread_confinement: bool = True
    """Fail fast when a guard is used off the UI thread."""

    # === Upload Progress ===

    report_done_on_unknown_length: bool = True
    """Emit a final done notification at end of write when the length is unknown."""

    default_chunk_size: int = 8192
    """Slice size used by the bundled bytes and file bodies."""

    # === Transport ===

    pump_queue_size: int = 4
    """Chunks buffered between the body writer thread and the HTTP client."""

    # === Metrics and Monitoring ===

    metrics_enabled: bool = True
    """Record counters in the default LifecycleMetrics instance."""

    def __post_init__(self) -> None:
        if self.default_chunk_size <= 0:
            raise ConfigurationError(
                f"default_chunk_size must be positive, got {self.default_chunk_size}"
            )
        if self.pump_queue_size <= 0:
            raise ConfigurationError(
                f"pump_queue_size must be positive, got {self.pump_queue_size}"
            )


_config = RequestLifecycleConfig()
_config_lock = threading.Lock()


def get_config() -> RequestLifecycleConfig:
    """Return the process-wide configuration."""
    return _config


def set_config(config: RequestLifecycleConfig) -> RequestLifecycleConfig:
    """
    Replace the process-wide configuration.

    Returns:
        The previous configuration, so tests can restore it.
    """
    global _config
    if not isinstance(config, RequestLifecycleConfig):
        raise ConfigurationError(
            f"Expected RequestLifecycleConfig, got {type(config).__name__}"
        )
    with _config_lock:
        previous = _config
        _config = config
    return previous


__all__ = ["RequestLifecycleConfig", "get_config", "set_config"]
