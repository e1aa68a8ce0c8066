"""Test case base class: registration, execution, and result storage."""
from __future__ import annotations

import logging
import time
from typing import Callable, List, NoReturn, Optional, Tuple

from .models import Outcome, TestFunction, TestRecord
from .signals import TestFailed, TestPassed

logger = logging.getLogger(__name__)


class TestCase:
    """Holds an ordered list of tests and runs them sequentially.

    Subclasses register their tests in ``__init__`` with :meth:`add`, usually
    passing bound methods::

        class MathCase(TestCase):
            def __init__(self):
                super().__init__()
                self.add(self.test_sum, "sum")

            def test_sum(self):
                Assert.assert_(1 + 1 == 2)

    Registration order is execution order and report order.
    """

    __test__ = False

    def __init__(self, name: Optional[str] = None) -> None:
        self._name = name or type(self).__name__
        self._data: List[TestRecord] = []

    @property
    def name(self) -> str:
        return self._name

    def setup(self) -> None:
        """Prepare fixtures. Runs once per :meth:`run`, before the first test."""

    def cleanup(self) -> None:
        """Release fixtures. Runs once per :meth:`run`, after the last test."""

    def add(self, function: TestFunction, name: str) -> TestRecord:
        record = TestRecord(function=function, name=name)
        self._data.append(record)
        return record

    def run(self) -> bool:
        """Run every registered test in order.

        Returns ``True`` if at least one test failed or raised an unexpected
        exception, ``False`` if all passed. ``cleanup()`` runs even when
        ``setup()`` raises; in that case no test body runs and every record is
        marked as an error.
        """

        failed = False
        for record in self._data:
            record.reset()
        try:
            try:
                self.setup()
            except Exception as exc:
                logger.warning("%s: setup failed: %s", self._name, exc)
                for record in self._data:
                    record.outcome = Outcome.ERROR
                    record.error = f"setup failed: {exc}"
                return True
            for record in self._data:
                if self.execute(record).failed:
                    failed = True
        finally:
            self.cleanup()
        return failed

    def execute(self, record: TestRecord) -> Outcome:
        """Run a single record, store its outcome and duration, and return the outcome."""

        record.reset()
        logger.debug("%s: running %r", self._name, record.name)
        start = time.perf_counter()
        try:
            record.function()
            outcome = Outcome.PASSED
        except TestFailed:
            outcome = Outcome.FAILED
        except TestPassed:
            outcome = Outcome.PASSED
        except (Exception, SystemExit) as exc:
            logger.warning("%s: %r raised %s: %s", self._name, record.name, type(exc).__name__, exc)
            outcome = Outcome.ERROR
            record.error = f"{type(exc).__name__}: {exc}"
        record.duration = time.perf_counter() - start
        record.outcome = outcome
        logger.debug("%s: %r -> %s (%.6fs)", self._name, record.name, outcome.value, record.duration)
        return outcome

    def list_tests(self) -> List[Tuple[str, Callable[[], Outcome]]]:
        """Return ``(name, invoke)`` pairs; ``invoke()`` runs that test alone."""

        return [(record.name, _bind(self, record)) for record in self._data]

    def pass_(self) -> NoReturn:
        """Finish the running test as passed."""

        raise TestPassed()

    def fail(self) -> NoReturn:
        """Finish the running test as failed."""

        raise TestFailed()

    def get_data(self) -> List[TestRecord]:
        """Return the live list of records. Callers must not reorder or remove entries."""

        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, tests={len(self._data)})"


def _bind(case: TestCase, record: TestRecord) -> Callable[[], Outcome]:
    def invoke() -> Outcome:
        return case.execute(record)

    return invoke
