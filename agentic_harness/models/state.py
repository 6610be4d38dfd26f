"""Aggregate state published by the run controller."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from typing import Self

from agentic_harness.models.definition import TestDefinition
from agentic_harness.models.result import TestResult


@dataclass(frozen=True, kw_only=True)
class RunState:
    """Snapshot of every test result plus whether a run is active."""

    results: Sequence[TestResult]
    is_running: bool = False

    @classmethod
    def initial(cls, definitions: Iterable[TestDefinition]) -> Self:
        """Build the idle state for the given definitions, in order."""
        return cls(results=tuple(TestResult.idle(d) for d in definitions))

    def get(self, test_id: str) -> TestResult:
        """Return the result for a test id.

        Raises:
            KeyError: If no result has that id

        """
        for result in self.results:
            if result.id == test_id:
                return result
        raise KeyError(test_id)

    def with_result(self, result: TestResult) -> Self:
        """Return a new state with the matching entry replaced."""
        self.get(result.id)
        return replace(
            self,
            results=tuple(
                result if current.id == result.id else current
                for current in self.results
            ),
        )

    def with_running(self, is_running: bool) -> Self:
        return replace(self, is_running=is_running)
