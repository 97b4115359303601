from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hookable._internal.common.constants import Phase
    from hookable._internal.common.types import Hook


class BaseHookableError(Exception):
    pass


class HookSignatureError(BaseHookableError):
    """Raised when a hook cannot receive its ``next`` continuation."""

    def __init__(self, *, name: str, phase: Phase, hook: Hook) -> None:
        self.name: str = name
        self.phase: Phase = phase
        self.hook: Hook = hook

        msg = (
            f"Your {phase.value} hook {hook!r} for {name!r} must accept "
            "a next argument as its last positional parameter -- "
            "e.g., def hook(*args): args[-1]()"
        )
        super().__init__(msg)


class HookInstallError(BaseHookableError):
    """Raised when a method cannot be wrapped with hook chains."""

    def __init__(self, *, host: object, name: str, reason: str) -> None:
        self.host: object = host
        self.name: str = name
        self.reason: str = reason
        super().__init__(f"Cannot hook {name!r} on {host!r}: {reason}")


class MissingCallbackError(BaseHookableError, TypeError):
    """Raised when a hooked call has no trailing completion callback."""

    def __init__(self, name: str) -> None:
        self.name: str = name
        msg = (
            f"{name}() must be called with a completion callback "
            "as its last positional argument."
        )
        super().__init__(msg)


class ContinuationReusedError(BaseHookableError, RuntimeError):
    """Raised when a single-use continuation is called twice."""

    def __init__(self, label: str) -> None:
        self.label: str = label
        super().__init__(f"{label} has already been called.")
