# ruff: noqa: ANN401
from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any, overload

from hookable._internal.chain.invocation import Invocation, split_receiver
from hookable._internal.common.constants import EMPTY, Phase
from hookable._internal.configuration import DEFAULT_CONFIGURATION
from hookable._internal.table import HookTable

if TYPE_CHECKING:
    from collections.abc import Callable

    from hookable._internal.common.types import Hook
    from hookable._internal.configuration import HookConfiguration


class HookedFunction:
    """A callback-style function composed with its own hook chains.

    Nothing is patched: the hooks live on this object and calling it runs
    before-hooks, the wrapped function and after-hooks in turn. Hooks get
    no host context.

    Usage:
        @hooked
        def load(key, callback):
            callback(None, storage[key])

        @load.before
        def normalize(key, next):
            next(None, key.lower())

        load("KEY", print)
    """

    def __init__(
        self,
        func: Callable[..., Any],
        *,
        config: HookConfiguration | None = None,
    ) -> None:
        self._func: Callable[..., Any] = func
        self._name: str = getattr(func, "__name__", repr(func))
        self._table: HookTable = HookTable()
        self._table.setup(self._name)
        self.config: HookConfiguration = config or DEFAULT_CONFIGURATION
        _ = functools.update_wrapper(self, func)

    def __repr__(self) -> str:
        return f"<HookedFunction {self._name}>"

    def __call__(self, *args: Any) -> Invocation:
        values, receiver = split_receiver(self._name, args)
        invocation = Invocation(
            name=self._name,
            target=self._func,
            table=self._table,
            receiver=receiver,
            config=self.config,
        )
        invocation.start(values)
        return invocation

    @property
    def name(self) -> str:
        return self._name

    @property
    def table(self) -> HookTable:
        return self._table

    @overload
    def before(self, fn: Hook) -> Hook: ...

    @overload
    def before(self, fn: None = None) -> Callable[[Hook], Hook]: ...

    def before(self, fn: Hook | None = None) -> Hook | Callable[[Hook], Hook]:
        return self._register(Phase.BEFORE, fn)

    @overload
    def after(self, fn: Hook) -> Hook: ...

    @overload
    def after(self, fn: None = None) -> Callable[[Hook], Hook]: ...

    def after(self, fn: Hook | None = None) -> Hook | Callable[[Hook], Hook]:
        return self._register(Phase.AFTER, fn)

    def remove_before(self, fn: Hook = EMPTY) -> None:
        self._table.remove(Phase.BEFORE, self._name, fn)

    def remove_after(self, fn: Hook = EMPTY) -> None:
        self._table.remove(Phase.AFTER, self._name, fn)

    def hooks_for(self, phase: Phase | str) -> tuple[Hook, ...]:
        return self._table.snapshot(phase, self._name)

    def _register(
        self,
        phase: Phase,
        fn: Hook | None,
    ) -> Hook | Callable[[Hook], Hook]:
        if fn is None:
            return functools.partial(self._register, phase)
        self._table.register(phase, self._name, fn)
        return fn


@overload
def hooked(
    func: Callable[..., Any],
    *,
    config: HookConfiguration | None = None,
) -> HookedFunction: ...


@overload
def hooked(
    func: None = None,
    *,
    config: HookConfiguration | None = None,
) -> Callable[[Callable[..., Any]], HookedFunction]: ...


def hooked(
    func: Callable[..., Any] | None = None,
    *,
    config: HookConfiguration | None = None,
) -> HookedFunction | Callable[[Callable[..., Any]], HookedFunction]:
    if func is None:
        return functools.partial(HookedFunction, config=config)
    return HookedFunction(func, config=config)
