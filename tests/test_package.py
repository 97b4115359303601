import inspect

import pytest

import hookable
from hookable._internal.chain.after import AfterChainRunner
from hookable._internal.chain.before import BeforeChainRunner


@pytest.mark.parametrize("name", hookable.__all__)
def test_public_names_resolve(name: str) -> None:
    assert getattr(hookable, name) is not None


@pytest.mark.parametrize("runner", [BeforeChainRunner, AfterChainRunner])
def test_chain_runners_are_concrete(runner: type) -> None:
    assert not inspect.isabstract(runner)
    for method in ("start", "hook_args", "replace_values", "complete"):
        assert inspect.isfunction(getattr(runner, method))
