from enum import Enum, unique
from typing import Any

from hookable._internal.common.datastructures import EmptyPlaceholder

EMPTY: Any = EmptyPlaceholder()
PATCH_SUFFIX = "__hookable_original"
TABLE_ATTR = "__hookable_table__"


@unique
class Phase(str, Enum):
    BEFORE = "before"
    AFTER = "after"


@unique
class ChainState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    SUSPENDED = "suspended"
    ADVANCING = "advancing"
    ABORTED = "aborted"
    COMPLETED = "completed"


@unique
class InvocationState(str, Enum):
    PENDING = "pending"
    BEFORE = "before"
    TARGET = "target"
    AFTER = "after"
    COMPLETED = "completed"
    ABORTED = "aborted"
    FAILED = "failed"
