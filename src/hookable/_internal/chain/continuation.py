# ruff: noqa: ANN401
from __future__ import annotations

from typing import TYPE_CHECKING, Any, final

from hookable._internal.exceptions import ContinuationReusedError

if TYPE_CHECKING:
    from collections.abc import Callable


@final
class Continuation:
    """Single-use ``next`` callable handed to hooks and targets.

    ``next()`` passes the current values through, ``next(err)`` aborts
    and ``next(None, *values)`` overrides the values seen downstream.
    """

    __slots__: tuple[str, ...] = ("_called", "_label", "_on_call")

    def __init__(
        self,
        on_call: Callable[[Any, tuple[Any, ...]], None],
        label: str,
    ) -> None:
        self._on_call: Callable[[Any, tuple[Any, ...]], None] = on_call
        self._label: str = label
        self._called: bool = False

    def __repr__(self) -> str:
        return f"<Continuation {self._label}>"

    def __call__(self, error: Any = None, /, *values: Any) -> None:
        if self._called:
            raise ContinuationReusedError(self._label)
        self._called = True
        self._on_call(error, values)
