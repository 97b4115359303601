from dataclasses import dataclass


@dataclass(slots=True, kw_only=True, frozen=True)
class HookConfiguration:
    """Options shared by every invocation of a hooked operation.

    Attributes:
        pass_context: Hooks of a hooked method receive the host instance
            as their first argument.
        snapshot_hooks: Each invocation copies its hook lists on chain
            entry. When disabled the running chain reads the live lists
            on every step.
    """

    pass_context: bool = True
    snapshot_hooks: bool = True


DEFAULT_CONFIGURATION = HookConfiguration()
