from typing import Any

from hookable import HookedFunction, Phase, hooked
from tests.conftest import Next, Receiver

storage = {"key": "value"}


@hooked
def load(key: str, callback: Next) -> None:
    """Load a value from storage."""
    if key not in storage:
        callback(KeyError(key))
    else:
        callback(None, storage[key])


def test_wraps_original_function() -> None:
    assert isinstance(load, HookedFunction)
    assert load.name == "load"
    assert load.__name__ == "load"
    assert load.__doc__ == "Load a value from storage."
    assert load.__wrapped__ is not None
    assert repr(load) == "<HookedFunction load>"


def test_without_hooks(receiver: Receiver) -> None:
    _ = load("key", receiver)
    _ = load("nope", receiver)

    assert receiver.calls[0] == (None, "value")
    (error,) = receiver.calls[1]
    assert isinstance(error, KeyError)


def test_decorator_with_options(receiver: Receiver) -> None:
    @hooked()
    def echo(value: Any, callback: Next) -> None:  # noqa: ANN401
        callback(None, value)

    @echo.before
    def normalize(value: str, next_: Next) -> None:
        next_(None, value.lower())

    @echo.after()
    def wrap(err: Any, value: str, next_: Next) -> None:  # noqa: ANN401
        next_(None, [value])

    assert echo.hooks_for(Phase.BEFORE) == (normalize,)
    assert echo.hooks_for("after") == (wrap,)

    _ = echo("KEY", receiver)

    assert receiver.once == (None, ["key"])


def test_remove_hooks(receiver: Receiver) -> None:
    @hooked
    def echo(value: Any, callback: Next) -> None:  # noqa: ANN401
        callback(None, value)

    def reject(*args: Any) -> None:
        args[-1](RuntimeError("rejected"))

    echo.before(reject)
    echo.after(reject)
    echo.after(reject)

    echo.remove_before(reject)
    echo.remove_after()

    assert echo.hooks_for(Phase.BEFORE) == ()
    assert echo.hooks_for(Phase.AFTER) == ()
    assert echo.table.count(Phase.AFTER, "echo") == 0

    _ = echo(1, receiver)
    assert receiver.once == (None, 1)


def test_separate_functions_do_not_share_hooks(receiver: Receiver) -> None:
    @hooked
    def first(callback: Next) -> None:
        callback(None, "first")

    @hooked
    def second(callback: Next) -> None:
        callback(None, "second")

    first.before(lambda next_: next_(RuntimeError("first only")))

    _ = second(receiver)
    assert receiver.once == (None, "second")
