# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Concrete lifecycle sources.

Classes:
    LifecycleRegistry: Observable lifecycle state with ordered dispatch.
    SimpleLifecycleOwner: LifecycleOwner backed by a LifecycleRegistry.
"""

from .registry import LifecycleRegistry, SimpleLifecycleOwner

__all__ = ["LifecycleRegistry", "SimpleLifecycleOwner"]
