import inspect
from collections.abc import Callable
from typing import Any

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def positional_capacity(func: Callable[..., Any]) -> int | None:
    """Count the positional parameters of ``func``.

    ``None`` means unbounded: the callable takes ``*args`` or its
    signature cannot be inspected.
    """
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return None

    count = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in _POSITIONAL:
            count += 1
    return count


def has_required_keywords(func: Callable[..., Any]) -> bool:
    """Whether ``func`` declares keyword-only parameters without defaults."""
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return False

    return any(
        param.kind is inspect.Parameter.KEYWORD_ONLY
        and param.default is inspect.Parameter.empty
        for param in sig.parameters.values()
    )


def accepts_continuation(func: Callable[..., Any], *, bound: bool) -> bool:
    # Hooks are called positionally, so a required keyword is never filled.
    if has_required_keywords(func):
        return False
    capacity = positional_capacity(func)
    if capacity is None:
        return True
    return capacity >= 1 + int(bound)
