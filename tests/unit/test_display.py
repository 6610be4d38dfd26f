"""Tests for console rendering."""

import io

from agentic_harness.controller import RunController
from agentic_harness.display import STATUS_LABELS, ConsoleRenderer, render_result
from agentic_harness.models.result import TestResult
from agentic_harness.testing.factories import TestResultFactory
from agentic_harness.testing.tasks import make_registry, passing, raising


def test_status_labels_cover_every_status() -> None:
    """Terminal statuses carry success and failure markers."""
    assert STATUS_LABELS == {
        "idle": "idle",
        "running": "running",
        "passed": "passed ✅",
        "failed": "failed ❌",
    }


def test_render_idle_result() -> None:
    """Idle results render only a header."""
    result = TestResultFactory.build(title="Math works")

    assert render_result(result) == ["Math works · idle"]


def test_render_failed_result_with_error_detail() -> None:
    """Failed results list their logs and the error detail."""
    result = TestResult(
        id="b",
        title="Breaks",
        status="failed",
        logs=("Starting...", "Error: boom"),
        error="boom",
    )

    assert render_result(result) == [
        "Breaks · failed ❌",
        "  - Starting...",
        "  - Error: boom",
        "  Error detail: boom",
    ]


def test_render_without_logs() -> None:
    """Log lines can be hidden while keeping the error detail."""
    result = TestResultFactory.build(
        title="Breaks", status="failed", logs=("Error: boom",), error="boom"
    )

    assert render_result(result, show_logs=False) == [
        "Breaks · failed ❌",
        "  Error detail: boom",
    ]


async def test_console_renderer_prints_only_changed_entries() -> None:
    """Each publish prints the entries that changed since the last one."""
    stream = io.StringIO()
    controller = RunController(
        registry=make_registry([("a", passing), ("b", raising(Exception("boom")))])
    )
    controller.subscribe(ConsoleRenderer(stream=stream, show_logs=False))

    await controller.run()

    assert stream.getvalue().splitlines() == [
        "Test a · idle",
        "Test b · idle",
        "Test a · running",
        "Test a · passed ✅",
        "Test b · running",
        "Test b · failed ❌",
        "  Error detail: boom",
    ]
