# ruff: noqa: ANN401
from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Any, final

from hookable._internal.chain.after import AfterChainRunner
from hookable._internal.chain.continuation import Continuation
from hookable._internal.common.constants import InvocationState
from hookable._internal.common.datastructures import Outcome

if TYPE_CHECKING:
    from hookable._internal.chain.invocation import Invocation

logger = logging.getLogger("hookable.chain")


@final
class TargetInvoker:
    __slots__: tuple[str, ...] = ("invocation", "outcome")

    def __init__(self, invocation: Invocation) -> None:
        self.invocation: Invocation = invocation
        self.outcome: Outcome | None = None

    def invoke(self, args: tuple[Any, ...]) -> None:
        # The completion callback always goes after the current values,
        # however many the before-chain left behind.
        callback = Continuation(
            self._on_complete,
            label=f"completion callback of {self.invocation.name!r}",
        )
        self.invocation.state = InvocationState.TARGET
        logger.debug(
            "Calling %r with %r",
            self.invocation.name,
            args,
        )
        self.invocation.target(*args, callback)

    def _on_complete(self, error: Any, values: tuple[Any, ...]) -> None:
        self.outcome = Outcome(error=error, values=values)
        runner = AfterChainRunner(self.invocation)
        self.invocation.schedule(functools.partial(runner.start, self.outcome))
