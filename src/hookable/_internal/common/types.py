from collections.abc import Callable
from typing import Any, TypeAlias

Hook: TypeAlias = Callable[..., Any]
Receiver: TypeAlias = Callable[..., Any]
Step: TypeAlias = Callable[[], None]
