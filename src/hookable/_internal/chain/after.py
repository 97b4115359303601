# ruff: noqa: ANN401
from __future__ import annotations

import logging
from typing import Any, final

from typing_extensions import override

from hookable._internal.chain.base import ChainRunner
from hookable._internal.common.constants import (
    ChainState,
    InvocationState,
    Phase,
)
from hookable._internal.common.datastructures import Outcome

logger = logging.getLogger("hookable.chain")


@final
class AfterChainRunner(ChainRunner[Outcome]):
    """After-hooks see ``(err, *values)`` with ``next`` appended."""

    phase = Phase.AFTER

    def start(self, outcome: Outcome) -> None:
        self.invocation.state = InvocationState.AFTER
        if outcome.failed:
            # A failed target skips every after-hook.
            self.state = ChainState.ABORTED
            self.error = outcome.error
            logger.debug(
                "%r reported an error, skipping after hooks: %r",
                self.invocation.name,
                outcome.error,
            )
            self.invocation.abort(outcome.error)
            return
        self.run(0, outcome)

    @override
    def hook_args(self, current: Outcome) -> tuple[Any, ...]:
        return (current.error, *current.values)

    @override
    def replace_values(
        self,
        current: Outcome,
        values: tuple[Any, ...],
    ) -> Outcome:
        return current.with_values(values)

    @override
    def complete(self, current: Outcome) -> None:
        self.invocation.complete(current)
