from collections.abc import Callable
from typing import Any, TypeAlias

import pytest

from hookable import Hookable

Next: TypeAlias = Callable[..., None]


class ValidationError(Exception):
    pass


def create_document_class() -> type[Hookable]:
    """Build a fresh host class so class-level hooks never leak."""

    class Document(Hookable):
        def __init__(self) -> None:
            self.calls: list[str] = []

        def is_valid(self, foo: str, _bar: int) -> bool:
            return foo == "foo"

        def save(self, foo: str, bar: int, callback: Next) -> None:
            self.calls.append("save")
            if not self.is_valid(foo, bar):
                callback(ValidationError(":("))
            else:
                callback(None, "bar", bar + 1)

    return Document


class Receiver:
    """Terminal callback that records every delivery."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> None:  # noqa: ANN401
        self.calls.append(args)

    @property
    def once(self) -> tuple[Any, ...]:
        assert len(self.calls) == 1, self.calls
        return self.calls[0]


@pytest.fixture
def document_cls() -> type[Hookable]:
    return create_document_class()


@pytest.fixture
def receiver() -> Receiver:
    return Receiver()
