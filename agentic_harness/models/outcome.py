"""Outcome of awaiting a single test task."""

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, kw_only=True)
class Passed:
    """The task completed without raising."""


@dataclass(frozen=True, kw_only=True)
class Failed:
    """The task raised; message is always non-empty."""

    message: str


Outcome: TypeAlias = Passed | Failed
