"""Before and after hook chains for callback-style methods.

This module exposes the ``Hookable`` mixin for classes, the ``hooked``
builder for plain functions and the pieces of the chain engine that
callers may want to inspect: the hook table, continuations and outcomes.
"""

from importlib.metadata import version as get_version

from hookable._internal.chain.continuation import Continuation
from hookable._internal.chain.invocation import Invocation
from hookable._internal.common.constants import (
    ChainState,
    InvocationState,
    Phase,
)
from hookable._internal.common.datastructures import Outcome
from hookable._internal.configuration import HookConfiguration
from hookable._internal.func_wrapper import HookedFunction, hooked
from hookable._internal.installer import HookedMethod, install, uninstall
from hookable._internal.table import HookTable
from hookable.hookable import Hookable

__version__ = get_version("hookable")
__all__ = (
    "ChainState",
    "Continuation",
    "HookConfiguration",
    "HookTable",
    "Hookable",
    "HookedFunction",
    "HookedMethod",
    "Invocation",
    "InvocationState",
    "Outcome",
    "Phase",
    "hooked",
    "install",
    "uninstall",
)
