# ruff: noqa: ANN401
from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Any, final

from hookable._internal.chain.before import BeforeChainRunner
from hookable._internal.common.constants import InvocationState
from hookable._internal.exceptions import MissingCallbackError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from hookable._internal.common.constants import Phase
    from hookable._internal.common.datastructures import Outcome
    from hookable._internal.common.types import Hook, Receiver, Step
    from hookable._internal.configuration import HookConfiguration
    from hookable._internal.table import HookTable

logger = logging.getLogger("hookable.chain")


def split_receiver(
    name: str,
    args: tuple[Any, ...],
) -> tuple[tuple[Any, ...], Receiver]:
    """Separate the argument vector from the trailing callback."""
    if not args or not callable(args[-1]):
        raise MissingCallbackError(name)
    return args[:-1], args[-1]


@final
class Invocation:
    """One top-level call of a hooked operation.

    Steps are queued and drained by a single driver loop. A continuation
    fired while the loop is running only enqueues; one fired later, after
    the hook suspended, restarts the loop. Exactly one of ``abort`` or
    ``complete`` reaches the receiver.
    """

    __slots__: tuple[str, ...] = (
        "_driving",
        "_snapshots",
        "_steps",
        "config",
        "context",
        "error",
        "name",
        "outcome",
        "receiver",
        "state",
        "table",
        "target",
    )

    def __init__(  # noqa: PLR0913
        self,
        *,
        name: str,
        target: Callable[..., Any],
        table: HookTable,
        receiver: Receiver,
        config: HookConfiguration,
        context: tuple[Any, ...] = (),
    ) -> None:
        self.name: str = name
        self.target: Callable[..., Any] = target
        self.table: HookTable = table
        self.receiver: Receiver = receiver
        self.config: HookConfiguration = config
        self.context: tuple[Any, ...] = context
        self.state: InvocationState = InvocationState.PENDING
        self.error: Any = None
        self.outcome: Outcome | None = None
        self._steps: deque[Step] = deque()
        self._snapshots: dict[Phase, tuple[Hook, ...]] = {}
        self._driving: bool = False

    def __repr__(self) -> str:
        return f"<Invocation {self.name!r} state={self.state.value}>"

    @property
    def done(self) -> bool:
        return self.state in {
            InvocationState.COMPLETED,
            InvocationState.ABORTED,
            InvocationState.FAILED,
        }

    def hooks(self, phase: Phase) -> Sequence[Hook]:
        if not self.config.snapshot_hooks:
            return self.table.hooks(phase, self.name)
        if phase not in self._snapshots:
            self._snapshots[phase] = self.table.snapshot(phase, self.name)
        return self._snapshots[phase]

    def start(self, args: tuple[Any, ...]) -> None:
        self.state = InvocationState.BEFORE
        self.schedule(lambda: BeforeChainRunner(self).start(args))

    def schedule(self, step: Step) -> None:
        self._steps.append(step)
        if not self._driving:
            self._drive()

    def _drive(self) -> None:
        self._driving = True
        try:
            while self._steps:
                step = self._steps.popleft()
                step()
        except BaseException:
            self._steps.clear()
            if not self.done:
                self.state = InvocationState.FAILED
            raise
        finally:
            self._driving = False

    def abort(self, error: Any) -> None:
        self.state = InvocationState.ABORTED
        self.error = error
        logger.debug("Delivering error of %r: %r", self.name, error)
        self.receiver(error)

    def complete(self, outcome: Outcome) -> None:
        self.state = InvocationState.COMPLETED
        self.outcome = outcome
        logger.debug("Delivering result of %r: %r", self.name, outcome)
        self.receiver(*outcome.as_callback_args())
