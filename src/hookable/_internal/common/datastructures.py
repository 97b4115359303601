# ruff: noqa: ANN401
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


class EmptyPlaceholder:
    def __repr__(self) -> str:
        return "EMPTY"

    def __hash__(self) -> int:
        return hash("EMPTY")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, self.__class__)

    def __bool__(self) -> bool:
        return False


def is_error(value: Any) -> bool:
    """Return True when a callback's leading slot reports a failure."""
    return bool(value)


@dataclass(slots=True, frozen=True)
class Outcome:
    """Error-first result threaded through the after-chain.

    ``error`` is the leading slot of a ``cb(err, *values)`` call and
    ``values`` everything after it.
    """

    error: Any = None
    values: tuple[Any, ...] = ()

    @property
    def failed(self) -> bool:
        return is_error(self.error)

    def with_values(self, values: tuple[Any, ...]) -> Outcome:
        return replace(self, values=values)

    def as_callback_args(self) -> tuple[Any, ...]:
        if self.failed:
            return (self.error,)
        return (self.error, *self.values)
