"""Models for the checks held by a test registry."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TypeAlias

Task: TypeAlias = Callable[[], Awaitable[object] | None]


@dataclass(frozen=True, kw_only=True)
class TestDefinition:
    """A named check paired with the work that performs it.

    The task takes no arguments. It may return normally, return an awaitable
    that completes later, or raise to signal failure.
    """

    __test__ = False

    id: str
    title: str
    task: Task = field(repr=False, compare=False)
