"""Custom exceptions for the hookable package.

Configuration errors (malformed hooks, uninstallable methods, calls
without a completion callback, reused continuations) are raised
synchronously. Errors reported through ``next(err)`` or by the hooked
method's own callback are never raised: they are delivered to the
caller's callback.
"""

from hookable._internal.exceptions import (
    BaseHookableError,
    ContinuationReusedError,
    HookInstallError,
    HookSignatureError,
    MissingCallbackError,
)

__all__ = (
    "BaseHookableError",
    "ContinuationReusedError",
    "HookInstallError",
    "HookSignatureError",
    "MissingCallbackError",
)
