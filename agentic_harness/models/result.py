"""Models for per-test execution results."""

from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Literal, Self

from agentic_harness.models.definition import TestDefinition

Status = Literal["idle", "running", "passed", "failed"]

STARTING_LOG = "Starting..."
COMPLETED_LOG = "Completed successfully"


class InvalidTransitionError(Exception):
    """Raised when a result is moved to a state it cannot reach."""


@dataclass(frozen=True, kw_only=True)
class TestResult:
    """Current status of one test within a run cycle.

    Results are immutable; each transition returns a new instance which the
    controller publishes in place of the old one.
    """

    __test__ = False

    id: str
    title: str
    status: Status = "idle"
    logs: Sequence[str] = ()
    error: str | None = None

    @classmethod
    def idle(cls, definition: TestDefinition) -> Self:
        """Create the result a test has before it is run."""
        return cls(id=definition.id, title=definition.title)

    @classmethod
    def running(cls, definition: TestDefinition) -> Self:
        """Create a fresh result for a test that has just started."""
        return cls(
            id=definition.id,
            title=definition.title,
            status="running",
            logs=(STARTING_LOG,),
        )

    @property
    def is_terminal(self) -> bool:
        """Whether the test has finished, successfully or not."""
        return self.status in ("passed", "failed")

    def passed(self) -> Self:
        """Return a copy marked as passed."""
        self._require_running("passed")
        return replace(self, status="passed", logs=(*self.logs, COMPLETED_LOG))

    def failed(self, message: str) -> Self:
        """Return a copy marked as failed with the given error message."""
        self._require_running("failed")
        return replace(
            self,
            status="failed",
            error=message,
            logs=(*self.logs, f"Error: {message}"),
        )

    def _require_running(self, target: Status) -> None:
        if self.status != "running":
            raise InvalidTransitionError(
                f"Cannot move test '{self.id}' from {self.status} to {target}"
            )
