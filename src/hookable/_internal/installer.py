# ruff: noqa: ANN401
from __future__ import annotations

import functools
import inspect
import logging
import types
from typing import TYPE_CHECKING, Any, final

from hookable._internal.chain.invocation import Invocation, split_receiver
from hookable._internal.common.constants import PATCH_SUFFIX, TABLE_ATTR
from hookable._internal.configuration import DEFAULT_CONFIGURATION
from hookable._internal.exceptions import HookInstallError
from hookable._internal.table import HookTable

if TYPE_CHECKING:
    from collections.abc import Callable

    from hookable._internal.configuration import HookConfiguration

logger = logging.getLogger("hookable.installer")


def table_for(host: type) -> HookTable:
    """Return the hook table owned by ``host``, creating it on demand."""
    table = host.__dict__.get(TABLE_ATTR)
    if table is None:
        table = HookTable()
        setattr(host, TABLE_ATTR, table)
    return table


def resolve_config(
    host: type,
    config: HookConfiguration | None,
) -> HookConfiguration:
    if config is not None:
        return config
    return getattr(host, "__hook_config__", None) or DEFAULT_CONFIGURATION


@final
class HookedMethod:
    """Descriptor standing in for a method wrapped with hook chains.

    The original attribute is kept as found on the class (function,
    staticmethod, an inherited ``HookedMethod``...) and bound per call the
    same way normal attribute lookup would bind it.
    """

    def __init__(  # noqa: PLR0913
        self,
        *,
        name: str,
        original: Any,
        owner: type,
        table: HookTable,
        config: HookConfiguration,
        inherited: bool,
    ) -> None:
        self.name: str = name
        self.original: Any = original
        self.owner: type = owner
        self.table: HookTable = table
        self.config: HookConfiguration = config
        self.inherited: bool = inherited
        self.__qualname__: str = f"{owner.__qualname__}.{name}"
        self.__doc__: str | None = getattr(original, "__doc__", None)

    def __repr__(self) -> str:
        return f"<HookedMethod {self.__qualname__}>"

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if self.binds_class:
            return types.MethodType(self, owner or type(instance))
        if instance is None:
            return self
        return types.MethodType(self, instance)

    @property
    def binds_class(self) -> bool:
        """Whether the wrapped method receives the class, as a classmethod."""
        resolved = self.resolve()
        if isinstance(resolved, HookedMethod):
            return resolved.binds_class
        return isinstance(resolved, classmethod)

    def resolve(self) -> Any:
        """Return the attribute this descriptor currently wraps.

        An inherited method is looked up past ``owner`` on every call, so a
        parent hooked after its subclass still runs its own chains.
        """
        if not self.inherited:
            return self.original
        for klass in self.owner.__mro__[1:]:
            if self.name in klass.__dict__:
                return klass.__dict__[self.name]
        return self.original

    def __call__(self, instance: Any, *args: Any, **kwargs: Any) -> Invocation:
        if kwargs:
            msg = (
                f"{self.__qualname__}() threads positional arguments only, "
                f"got keyword argument(s) {sorted(kwargs)}"
            )
            raise TypeError(msg)

        values, receiver = split_receiver(self.__qualname__, args)
        invocation = Invocation(
            name=self.name,
            target=self.bind(instance),
            table=self.table,
            receiver=receiver,
            config=self.config,
            context=(instance,) if self.config.pass_context else (),
        )
        invocation.start(values)
        return invocation

    def bind(self, instance: Any) -> Callable[..., Any]:
        original = self.resolve()
        getter = getattr(type(original), "__get__", None)
        if getter is None:
            return original
        if self.binds_class:
            return getter(original, None, instance)
        return getter(original, instance, type(instance))


def is_installed(host: type, name: str) -> bool:
    return isinstance(host.__dict__.get(name), HookedMethod)


def install(
    host: type,
    name: str,
    *,
    config: HookConfiguration | None = None,
) -> HookedMethod:
    """Wrap ``host.<name>`` with hook chains, at most once per class."""
    if not isinstance(host, type):
        raise HookInstallError(
            host=host,
            name=name,
            reason="hooks are installed on classes, not instances",
        )
    if not isinstance(name, str) or not name:
        raise HookInstallError(
            host=host,
            name=str(name),
            reason="method name must be a non-empty string",
        )

    current = host.__dict__.get(name)
    if isinstance(current, HookedMethod):
        return current

    try:
        original = inspect.getattr_static(host, name)
    except AttributeError:
        raise HookInstallError(
            host=host,
            name=name,
            reason="no such attribute",
        ) from None
    if not callable(getattr(host, name)):
        raise HookInstallError(host=host, name=name, reason="not callable")

    table = table_for(host)
    table.setup(name)
    hooked = HookedMethod(
        name=name,
        original=original,
        owner=host,
        table=table,
        config=resolve_config(host, config),
        inherited=current is None,
    )
    _ = functools.update_wrapper(
        hooked,
        getattr(host, name),
        assigned=("__module__", "__name__", "__doc__"),
        updated=(),
    )
    setattr(host, f"{name}{PATCH_SUFFIX}", original)
    setattr(host, name, hooked)
    logger.debug("Installed hooks on %s", hooked.__qualname__)
    return hooked


def uninstall(host: type, name: str) -> bool:
    """Restore the original ``host.<name>`` and drop its hooks."""
    hooked = host.__dict__.get(name)
    if not isinstance(hooked, HookedMethod):
        return False

    if hooked.inherited:
        delattr(host, name)
    else:
        setattr(host, name, hooked.original)
    delattr(host, f"{name}{PATCH_SUFFIX}")
    hooked.table.discard(name)
    logger.debug("Removed hooks from %s", hooked.__qualname__)
    return True
