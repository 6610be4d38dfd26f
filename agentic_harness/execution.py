"""Invocation boundary between the controller and a test task."""

import asyncio
import inspect
import logging

from agentic_harness.models.definition import Task
from agentic_harness.models.outcome import Failed, Outcome, Passed

log = logging.getLogger(__name__)

UNKNOWN_FAILURE = "Unknown failure"


def failure_message(exc: BaseException) -> str:
    """Extract a human-readable message from a raised exception."""
    message = str(exc)
    return message if message.strip() else UNKNOWN_FAILURE


async def _invoke(task: Task) -> None:
    if inspect.isawaitable(value := task()):
        await value


async def execute(task: Task) -> Outcome:
    """Run a task to completion and report how it ended.

    Synchronous and asynchronous tasks are both wrapped in a single asyncio
    task, so callers await them the same way. Any ``Exception`` raised by the
    task is converted into a ``Failed`` outcome; cancellation propagates.
    """
    try:
        await asyncio.ensure_future(_invoke(task))
    except Exception as e:
        log.debug("Task raised %s", type(e).__name__, exc_info=e)
        return Failed(message=failure_message(e))
    return Passed()
