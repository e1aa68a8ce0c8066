"""Control signals raised from inside a running test body.

Signals carry no payload. They unwind the test body regardless of call depth
and are caught by :meth:`enki.core.case.TestCase.run`.
"""
from __future__ import annotations


class TestSignal(Exception):
    """Base class for pass/fail signals."""

    __test__ = False

    message = "Test signal"

    def __init__(self) -> None:
        super().__init__(self.message)


class TestPassed(TestSignal):
    """Ends the running test early as passed."""

    message = "Test passed"


class TestFailed(TestSignal):
    """Ends the running test as failed."""

    message = "Test failed"


# Names used by the error taxonomy.
AssertionFailed = TestFailed
TestPassedEarly = TestPassed
