"""Configuration for the harness command line."""

from typing import Literal

from pydantic import Field

from agentic_harness.models.base import Model


class HarnessConfig(Model):
    """Settings accepted as JSON by the ``agentic-harness`` command."""

    runs: int = Field(default=1, ge=1, description="Run cycles, reset in between")
    show_logs: bool = Field(default=True, description="Print per-test log lines")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
