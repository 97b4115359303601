# ruff: noqa: ANN401
from __future__ import annotations

from typing import Any, final

from typing_extensions import override

from hookable._internal.chain.base import ChainRunner
from hookable._internal.chain.target import TargetInvoker
from hookable._internal.common.constants import Phase


@final
class BeforeChainRunner(ChainRunner[tuple[Any, ...]]):
    """Before-hooks see the current argument vector, then ``next``."""

    phase = Phase.BEFORE

    def start(self, args: tuple[Any, ...]) -> None:
        self.run(0, args)

    @override
    def hook_args(self, current: tuple[Any, ...]) -> tuple[Any, ...]:
        return current

    @override
    def replace_values(
        self,
        current: tuple[Any, ...],
        values: tuple[Any, ...],
    ) -> tuple[Any, ...]:
        return values

    @override
    def complete(self, current: tuple[Any, ...]) -> None:
        TargetInvoker(self.invocation).invoke(current)
