"""Ordered, immutable collection of test definitions."""

from collections.abc import Iterable, Iterator, Sequence
from agentic_harness.models.definition import TestDefinition


class RegistryError(Exception):
    """Base error for invalid registries."""


class EmptyRegistryError(RegistryError):
    """Raised when a registry is created without any tests."""


class DuplicateTestIdError(RegistryError):
    """Raised when two tests in a registry share an id."""


class TestRegistry:
    """Fixed list of checks, enumerated in declaration order."""

    __test__ = False

    def __init__(self, definitions: Iterable[TestDefinition]) -> None:
        items = tuple(definitions)
        if not items:
            raise EmptyRegistryError("A test registry needs at least one test")

        seen: set[str] = set()
        for definition in items:
            if definition.id in seen:
                raise DuplicateTestIdError(f"Duplicate test id '{definition.id}'")
            seen.add(definition.id)

        self._definitions = items

    @property
    def definitions(self) -> Sequence[TestDefinition]:
        return self._definitions

    def list(self) -> Sequence[TestDefinition]:
        """Return the definitions in order; the same tuple on every call."""
        return self.definitions

    def ids(self) -> Sequence[str]:
        return tuple(d.id for d in self.definitions)

    def __iter__(self) -> Iterator[TestDefinition]:
        return iter(self.definitions)

    def __len__(self) -> int:
        return len(self.definitions)
