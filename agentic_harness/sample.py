"""Built-in sanity checks for a deployment."""

import asyncio
from types import SimpleNamespace

from agentic_harness.models.definition import TestDefinition
from agentic_harness.registry import TestRegistry

EXPECTED_TOTAL = 500500


def check_math() -> None:
    """Sum 1..1000 and compare against the closed-form total."""
    total = sum(range(1, 1001))
    if total != EXPECTED_TOTAL:
        raise AssertionError(f"Expected {EXPECTED_TOTAL} but received {total}")


async def check_async() -> None:
    """Await three delays of different lengths and ensure all of them finish."""
    tracker: list[int] = []

    async def push_after(delay_ms: int, value: int) -> None:
        await asyncio.sleep(delay_ms / 1000)
        tracker.append(value)

    await asyncio.gather(push_after(20, 1), push_after(10, 2), push_after(5, 3))

    if len(tracker) != 3:
        raise AssertionError("Expected three entries in tracker.")


def check_host_api() -> None:
    """Set an attribute on a host object and read it back."""
    element = SimpleNamespace(dataset=SimpleNamespace())
    element.dataset.test = "ready"

    if not getattr(element.dataset, "test", None):
        raise AssertionError("Dataset assignment failed.")


def sample_registry() -> TestRegistry:
    return TestRegistry(
        [
            TestDefinition(
                id="math",
                title="Math computations remain precise",
                task=check_math,
            ),
            TestDefinition(
                id="async",
                title="Async flows resolve in order",
                task=check_async,
            ),
            TestDefinition(
                id="env",
                title="Host APIs behave as expected",
                task=check_host_api,
            ),
        ]
    )
