"""Task helpers for building registries in tests."""

import asyncio
from collections.abc import Callable, Sequence

from agentic_harness.models.definition import Task, TestDefinition
from agentic_harness.registry import TestRegistry


def passing() -> None:
    """Task that completes immediately."""


def raising(exc: BaseException) -> Task:
    """Build a task that raises the given exception."""

    def task() -> None:
        raise exc

    return task


def sleeping(seconds: float, on_done: Callable[[], None] | None = None) -> Task:
    """Build an async task that sleeps, then calls ``on_done``."""

    async def task() -> None:
        await asyncio.sleep(seconds)
        if on_done is not None:
            on_done()

    return task


def make_registry(tasks: Sequence[tuple[str, Task]]) -> TestRegistry:
    """Build a registry from ``(id, task)`` pairs, titled after their ids."""
    return TestRegistry(
        TestDefinition(id=test_id, title=f"Test {test_id}", task=task)
        for test_id, task in tasks
    )
