"""Run controller for sequential test execution."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeAlias

from agentic_harness.execution import execute
from agentic_harness.models.outcome import Failed, Passed
from agentic_harness.models.result import TestResult
from agentic_harness.models.state import RunState
from agentic_harness.registry import TestRegistry

log = logging.getLogger(__name__)

Observer: TypeAlias = Callable[[RunState], None]


@dataclass(kw_only=True)
class RunController:
    """Runs a registry's tests one at a time and publishes each transition.

    The controller owns the only mutable ``RunState``. Every change replaces
    the snapshot as a whole and is pushed synchronously to subscribed
    observers, which must treat the snapshot as read-only.
    """

    registry: TestRegistry
    _state: RunState = field(init=False, repr=False)
    _observers: list[Observer] = field(init=False, default_factory=list, repr=False)

    def __post_init__(self) -> None:
        self._state = RunState.initial(self.registry.list())

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state.is_running

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register an observer and return a callable that removes it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    async def run(self) -> RunState:
        """Execute every test in registry order, exactly once each.

        A call made while a run is already active is ignored and returns the
        current snapshot. Test failures are recorded on their result and never
        raised from here.

        Returns:
            The state after the last test reached a terminal status

        """
        if self._state.is_running:
            log.warning("Run already in progress, ignoring run request")
            return self._state

        log.info("Starting run of %d test(s)", len(self.registry))
        self._publish(self._state.with_running(True))

        try:
            for definition in self.registry.list():
                result = TestResult.running(definition)
                self._publish(self._state.with_result(result))

                match await execute(definition.task):
                    case Passed():
                        result = result.passed()
                    case Failed(message=message):
                        result = result.failed(message)

                log.info("Test finished: id=%s status=%s", result.id, result.status)
                self._publish(self._state.with_result(result))
        finally:
            self._publish(self._state.with_running(False))

        log.info("Run completed")
        return self._state

    def reset(self) -> RunState:
        """Return every result to idle with empty logs.

        Ignored while a run is active.
        """
        if self._state.is_running:
            log.warning("Run in progress, ignoring reset request")
            return self._state

        self._publish(RunState.initial(self.registry.list()))
        log.debug("State reset")
        return self._state

    def _publish(self, state: RunState) -> None:
        self._state = state
        for observer in tuple(self._observers):
            try:
                observer(state)
            except Exception as e:
                log.error("State observer %r failed: %s", observer, e, exc_info=e)
