# ruff: noqa: ANN401
from __future__ import annotations

import functools
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from hookable._internal.chain.continuation import Continuation
from hookable._internal.common.constants import ChainState, Phase
from hookable._internal.common.datastructures import is_error
from hookable._internal.exceptions import HookSignatureError
from hookable._internal.inspection import accepts_continuation

if TYPE_CHECKING:
    from hookable._internal.chain.invocation import Invocation

logger = logging.getLogger("hookable.chain")

CurrentT = TypeVar("CurrentT")


class ChainRunner(ABC, Generic[CurrentT]):
    """Serial executor for one phase of an invocation.

    Every hook gets a fresh continuation bound to its index. Calling it
    only queues the next transition on the invocation, so hooks that
    complete synchronously never deepen the call stack and the next hook
    starts only after the current one has signalled.
    """

    phase: ClassVar[Phase]

    __slots__: tuple[str, ...] = ("error", "index", "invocation", "state")

    def __init__(self, invocation: Invocation) -> None:
        self.invocation: Invocation = invocation
        self.state: ChainState = ChainState.IDLE
        self.index: int = 0
        self.error: Any = None

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} {self.invocation.name!r} "
            f"state={self.state.value} index={self.index}>"
        )

    @abstractmethod
    def hook_args(self, current: CurrentT) -> tuple[Any, ...]:
        raise NotImplementedError

    @abstractmethod
    def replace_values(
        self,
        current: CurrentT,
        values: tuple[Any, ...],
    ) -> CurrentT:
        raise NotImplementedError

    @abstractmethod
    def complete(self, current: CurrentT) -> None:
        raise NotImplementedError

    def run(self, index: int, current: CurrentT) -> None:
        hooks = self.invocation.hooks(self.phase)
        self.index = index
        if index >= len(hooks):
            self.state = ChainState.COMPLETED
            logger.debug(
                "%s chain of %r finished after %d hook(s)",
                self.phase.value,
                self.invocation.name,
                index,
            )
            self.complete(current)
            return

        hook = hooks[index]
        context = self.invocation.context
        if not accepts_continuation(hook, bound=bool(context)):
            raise HookSignatureError(
                name=self.invocation.name,
                phase=self.phase,
                hook=hook,
            )

        next_ = Continuation(
            functools.partial(self._on_next, index, current),
            label=(
                f"{self.phase.value} hook #{index} of "
                f"{self.invocation.name!r}"
            ),
        )
        self.state = ChainState.RUNNING
        logger.debug(
            "Running %s hook #%d %r of %r",
            self.phase.value,
            index,
            hook,
            self.invocation.name,
        )
        hook(*context, *self.hook_args(current), next_)
        if self.state is ChainState.RUNNING and self.index == index:
            self.state = ChainState.SUSPENDED

    def _on_next(
        self,
        index: int,
        current: CurrentT,
        error: Any,
        values: tuple[Any, ...],
    ) -> None:
        if is_error(error):
            self.state = ChainState.ABORTED
            self.error = error
            logger.debug(
                "%s hook #%d of %r aborted the chain: %r",
                self.phase.value,
                index,
                self.invocation.name,
                error,
            )
            self.invocation.schedule(
                functools.partial(self.invocation.abort, error),
            )
            return

        if values:
            current = self.replace_values(current, values)
            logger.debug(
                "%s hook #%d of %r overrode values: %r",
                self.phase.value,
                index,
                self.invocation.name,
                values,
            )
        self.state = ChainState.ADVANCING
        self.invocation.schedule(
            functools.partial(self.run, index + 1, current),
        )
