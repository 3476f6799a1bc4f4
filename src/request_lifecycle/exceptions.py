# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Exception classes for the request lifecycle library.

This module defines the exception hierarchy used throughout the library.
All exceptions inherit from RequestLifecycleError, making it easy to catch
all library errors with a single except clause.
"""


class RequestLifecycleError(Exception):
    """Base exception for all request lifecycle errors.

    Example:
        try:
            guard = LifecycleGuard(call, callback, owner)
        except RequestLifecycleError as e:
            logger.error(f"Could not bind call: {e}")
    """

    pass


class ThreadConfinementError(RequestLifecycleError, RuntimeError):
    """Raised when a confined operation is invoked off its designated thread.

    This is a programmer error: guard construction, callback forwarding and
    lifecycle dispatch must all run on the UI thread. It is raised before
    the operation has any side effect and is never retried or swallowed.

    Attributes:
        operation: Name of the operation that was invoked.
        thread_name: Name of the thread it was invoked from.
    """

    def __init__(self, operation: str, thread_name: str | None = None):
        super().__init__(f"Cannot invoke {operation} on a background thread")
        self.operation = operation
        self.thread_name = thread_name


class LifecycleStateError(RequestLifecycleError):
    """Raised when a lifecycle registry is driven through an invalid transition.

    The only invalid transition is leaving DESTROYED: once a lifecycle is
    destroyed it never comes back.

    Attributes:
        state: The state the lifecycle was in when the event arrived.
    """

    def __init__(self, message: str, state: object | None = None):
        super().__init__(message)
        self.state = state


class CallCancelledError(RequestLifecycleError, OSError):
    """Reported through on_failure when an in-flight call was cancelled.

    Subclasses OSError so callers that treat transport failures as I/O
    errors keep working.
    """

    def __init__(self, message: str = "Canceled"):
        super().__init__(message)


class ConfigurationError(RequestLifecycleError):
    """Raised when configuration is invalid.

    Common causes include:
    - Non-positive chunk or queue sizes
    - Type mismatches in configuration values
    """

    pass
