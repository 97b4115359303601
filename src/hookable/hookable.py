"""Hookable entrypoint."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, ClassVar, overload

from hookable._internal.common.constants import EMPTY, Phase
from hookable._internal.installer import (
    install,
    is_installed,
    table_for,
    uninstall,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from hookable._internal.common.types import Hook
    from hookable._internal.configuration import HookConfiguration


class Hookable:
    """Mixin adding before and after hook chains to callback-style methods.

    Hooks are registered per class and shared by all of its instances.
    The first registration for a method name wraps that method; later
    registrations only append to its chains.

    A hooked method must take a completion callback as its last positional
    argument and call it once, error first. Before-hooks receive the
    instance, the current arguments and ``next``; after-hooks receive the
    instance, ``(err, *results)`` and ``next``::

        class Document(Hookable):
            def save(self, foo, bar, callback):
                callback(None, foo, bar)

        @Document.before("save")
        def validate(self, foo, bar, next):
            next(None, foo, bar + 1)

    Subclasses get their own tables; hooking a method a parent already
    hooks runs the subclass chains around the parent ones.
    """

    __hook_config__: ClassVar[HookConfiguration | None] = None

    @classmethod
    def hook(cls, name: str) -> None:
        """Prepare ``name`` for hooks without registering any."""
        _ = install(cls, name)

    @classmethod
    def unhook(cls, name: str) -> bool:
        """Restore the original method and forget its hooks."""
        return uninstall(cls, name)

    @classmethod
    def is_hooked(cls, name: str) -> bool:
        return is_installed(cls, name)

    @overload
    @classmethod
    def before(cls, name: str, fn: Hook) -> Hook: ...

    @overload
    @classmethod
    def before(
        cls,
        name: str,
        fn: None = None,
    ) -> Callable[[Hook], Hook]: ...

    @classmethod
    def before(
        cls,
        name: str,
        fn: Hook | None = None,
    ) -> Hook | Callable[[Hook], Hook]:
        """Run ``fn`` before ``name``; usable as a decorator."""
        return cls._register_hook(Phase.BEFORE, name, fn)

    @overload
    @classmethod
    def after(cls, name: str, fn: Hook) -> Hook: ...

    @overload
    @classmethod
    def after(
        cls,
        name: str,
        fn: None = None,
    ) -> Callable[[Hook], Hook]: ...

    @classmethod
    def after(
        cls,
        name: str,
        fn: Hook | None = None,
    ) -> Hook | Callable[[Hook], Hook]:
        """Run ``fn`` after the callback of ``name`` fires."""
        return cls._register_hook(Phase.AFTER, name, fn)

    @classmethod
    def remove_before(cls, name: str, fn: Hook = EMPTY) -> None:
        """Remove one before-hook, or all of them when ``fn`` is omitted."""
        table_for(cls).remove(Phase.BEFORE, name, fn)

    @classmethod
    def remove_after(cls, name: str, fn: Hook = EMPTY) -> None:
        """Remove one after-hook, or all of them when ``fn`` is omitted."""
        table_for(cls).remove(Phase.AFTER, name, fn)

    @classmethod
    def hooks_for(cls, phase: Phase | str, name: str) -> tuple[Hook, ...]:
        return table_for(cls).snapshot(phase, name)

    @classmethod
    def _register_hook(
        cls,
        phase: Phase,
        name: str,
        fn: Hook | None,
    ) -> Hook | Callable[[Hook], Hook]:
        if fn is None:
            return functools.partial(cls._register_hook, phase, name)
        _ = install(cls, name)
        table_for(cls).register(phase, name, fn)
        return fn
