from __future__ import annotations

from typing import TYPE_CHECKING, final

from hookable._internal.common.constants import EMPTY, Phase

if TYPE_CHECKING:
    from collections.abc import Iterator

    from hookable._internal.common.types import Hook


@final
class HookTable:
    """Ordered before/after hook lists keyed by method name.

    Lists are created lazily and insertion order is execution order.
    The table is not synchronized: register hooks from one place and
    avoid mutating it while a chain of the same method is running
    unless hooks are snapshotted.
    """

    __slots__: tuple[str, ...] = ("_lists",)

    def __init__(self) -> None:
        self._lists: dict[Phase, dict[str, list[Hook]]] = {
            Phase.BEFORE: {},
            Phase.AFTER: {},
        }

    def __repr__(self) -> str:
        names = ", ".join(repr(name) for name in self.names())
        return f"{type(self).__name__}({names})"

    def __contains__(self, name: object) -> bool:
        return name in self._lists[Phase.BEFORE]

    def setup(self, name: str) -> None:
        for lists in self._lists.values():
            _ = lists.setdefault(name, [])

    def is_hooked(self, name: str) -> bool:
        return name in self

    def names(self) -> Iterator[str]:
        yield from self._lists[Phase.BEFORE]

    def hooks(self, phase: Phase | str, name: str) -> list[Hook]:
        self.setup(name)
        return self._lists[Phase(phase)][name]

    def snapshot(self, phase: Phase | str, name: str) -> tuple[Hook, ...]:
        """Copy the current hooks of ``name`` without creating its lists."""
        return tuple(self._lists[Phase(phase)].get(name, ()))

    def count(self, phase: Phase | str, name: str) -> int:
        return len(self._lists[Phase(phase)].get(name, ()))

    def has_hooks(self, phase: Phase | str, name: str) -> bool:
        return self.count(phase, name) > 0

    def register(self, phase: Phase | str, name: str, fn: Hook) -> None:
        if not callable(fn):
            msg = f"{Phase(phase).value} hook for {name!r} must be callable"
            raise TypeError(msg)
        self.hooks(phase, name).append(fn)

    def remove(
        self,
        phase: Phase | str,
        name: str,
        fn: Hook = EMPTY,
    ) -> None:
        hooks = self._lists[Phase(phase)].get(name)
        if hooks is None:
            return
        if fn is EMPTY:
            hooks.clear()
            return

        for index, current in enumerate(hooks):
            if current is fn:
                del hooks[index]
                return

    def discard(self, name: str) -> None:
        for lists in self._lists.values():
            _ = lists.pop(name, None)

    def clear(self) -> None:
        for lists in self._lists.values():
            lists.clear()
