"""Console rendering of run state."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TextIO

from agentic_harness.models.result import Status, TestResult
from agentic_harness.models.state import RunState

STATUS_LABELS: Mapping[Status, str] = {
    "idle": "idle",
    "running": "running",
    "passed": "passed ✅",
    "failed": "failed ❌",
}


def render_result(result: TestResult, *, show_logs: bool = True) -> Sequence[str]:
    """Format a result as display lines: header, logs, then error detail."""
    lines = [f"{result.title} · {STATUS_LABELS[result.status]}"]
    if show_logs:
        lines.extend(f"  - {entry}" for entry in result.logs)
    if result.error:
        lines.append(f"  Error detail: {result.error}")
    return lines


@dataclass(kw_only=True)
class ConsoleRenderer:
    """Observer that prints each result as soon as its entry changes."""

    stream: TextIO
    show_logs: bool = True
    _previous: Mapping[str, TestResult] = field(
        init=False, default_factory=dict, repr=False
    )

    def __call__(self, state: RunState) -> None:
        for result in state.results:
            if self._previous.get(result.id) != result:
                for line in render_result(result, show_logs=self.show_logs):
                    print(line, file=self.stream)
        self.stream.flush()
        self._previous = {result.id: result for result in state.results}
