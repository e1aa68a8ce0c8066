"""Core dataclasses shared across enki subsystems."""
from __future__ import annotations

import enum
from dataclasses import FrozenInstanceError, dataclass
from typing import Any, Callable, Optional


TestFunction = Callable[[], Any]


class Outcome(enum.Enum):
    """Result of the most recent execution of a test record."""

    PENDING = "pending"
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"

    @property
    def failed(self) -> bool:
        return self in (Outcome.FAILED, Outcome.ERROR)


@dataclass(frozen=True)
class Tolerance:
    """Numerical tolerance definition for array comparisons."""

    absolute: float = 1e-4
    relative: float = 1e-5


@dataclass
class TestRecord:
    """A registered test together with its latest outcome.

    ``name`` is fixed once the record exists; the outcome fields are rewritten
    on every run.
    """

    __test__ = False  # keep pytest from collecting this class

    function: TestFunction
    name: str
    outcome: Outcome = Outcome.PENDING
    duration: float = 0.0
    error: Optional[str] = None

    def __setattr__(self, key: str, value: Any) -> None:
        if key == "name" and "name" in self.__dict__:
            raise FrozenInstanceError("cannot assign to field 'name'")
        super().__setattr__(key, value)

    @property
    def passed(self) -> bool:
        return self.outcome is Outcome.PASSED

    def reset(self) -> None:
        self.outcome = Outcome.PENDING
        self.duration = 0.0
        self.error = None
