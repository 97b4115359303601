from typing import Any

from hookable import Hookable, InvocationState
from tests.conftest import Next, Receiver, ValidationError


def register_document_hooks(document_cls: type[Hookable]) -> list[str]:
    events: list[str] = []

    @document_cls.before("save")
    def validate(self: Any, foo: str, bar: int, next_: Next) -> None:
        events.append("validate")
        if self.is_valid(foo, bar):
            bar += 1
            next_(None, foo, bar)
        else:
            next_(ValidationError("Invalid"))

    @document_cls.after("save")
    def create_job(
        self: Any,
        error: Exception | None,
        foo: str,
        bar: int,
        next_: Next,
    ) -> None:
        events.append("create_job")
        bar += 1
        next_()

    return events


def test_handle_no_errors(
    document_cls: type[Hookable],
    receiver: Receiver,
) -> None:
    events = register_document_hooks(document_cls)
    document = document_cls()

    invocation = document.save("foo", 0, receiver)

    assert receiver.once == (None, "bar", 2)
    assert events == ["validate", "create_job"]
    assert document.calls == ["save"]
    assert invocation.state is InvocationState.COMPLETED


def test_handle_errors(
    document_cls: type[Hookable],
    receiver: Receiver,
) -> None:
    events = register_document_hooks(document_cls)
    document = document_cls()

    invocation = document.save("baz", 0, receiver)

    (error,) = receiver.once
    assert isinstance(error, ValidationError)
    assert str(error) == "Invalid"
    assert events == ["validate"]
    assert document.calls == []
    assert invocation.state is InvocationState.ABORTED
    assert invocation.error is error


def test_target_error_skips_after_hooks(
    document_cls: type[Hookable],
    receiver: Receiver,
) -> None:
    events: list[str] = []

    @document_cls.after("save")
    def never(self: Any, *args: Any) -> None:
        events.append("after")
        args[-1]()

    document = document_cls()
    _ = document.save("baz", 0, receiver)

    (error,) = receiver.once
    assert isinstance(error, ValidationError)
    assert document.calls == ["save"]
    assert events == []
