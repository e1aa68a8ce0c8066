from __future__ import annotations

import sys

import numpy as np
import pytest

from enki.core import Assert, TestCase, TestFailed, TestPassed, Tolerance


@pytest.mark.parametrize("condition", [True, 1, "x", [0]])
def test_assert_accepts_truthy(condition) -> None:
    Assert.assert_(condition)


@pytest.mark.parametrize("condition", [False, 0, "", []])
def test_assert_rejects_falsy(condition) -> None:
    with pytest.raises(TestFailed):
        Assert.assert_(condition)


def test_that_is_alias() -> None:
    Assert.that(2 > 1)
    with pytest.raises(TestFailed):
        Assert.that(1 > 2)


def test_assert_exception_passes_when_operation_raises() -> None:
    def boom() -> None:
        raise RuntimeError("boom")

    Assert.assert_exception(boom)


def test_assert_exception_fails_when_operation_returns() -> None:
    with pytest.raises(TestFailed):
        Assert.assert_exception(lambda: None)


def test_assert_exception_counts_system_exit() -> None:
    Assert.assert_exception(lambda: sys.exit(1))


def test_assert_exception_lets_keyboard_interrupt_through() -> None:
    def interrupt() -> None:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        Assert.assert_exception(interrupt)


def test_assert_exception_absorbs_framework_signals() -> None:
    # Pass/fail signals raised inside the probed operation are treated like any
    # other exception and do not propagate.
    case = TestCase()
    Assert.assert_exception(case.fail)
    Assert.assert_exception(case.pass_)


def test_assert_exception_absorbed_fail_does_not_fail_running_test() -> None:
    class SignalCase(TestCase):
        def __init__(self) -> None:
            super().__init__()
            self.add(self.probe_fail, "probe fail")

        def probe_fail(self) -> None:
            Assert.assert_exception(self.fail)

    case = SignalCase()
    assert case.run() is False
    assert case.get_data()[0].passed


def test_assert_array_equals() -> None:
    Assert.assert_array_equals([1, 2, 3], [1, 2, 3])
    Assert.assert_array_equals([], [])
    Assert.assert_array_equals("abc", ["a", "b", "c"])
    with pytest.raises(TestFailed):
        Assert.assert_array_equals([1, 2, 3], [1, 2, 4])


def test_assert_array_equals_length_mismatch() -> None:
    with pytest.raises(TestFailed):
        Assert.assert_array_equals([1, 2, 3], [1, 2])


def test_assert_array_equals_explicit_lengths_compare_prefix() -> None:
    Assert.assert_array_equals([1, 2, 3, 9], [1, 2, 3, 7], 3, 3)
    with pytest.raises(TestFailed):
        Assert.assert_array_equals([1, 2, 3], [1, 2, 3], 3, 2)


def test_assert_array_equals_stops_at_first_mismatch() -> None:
    seen: list[int] = []

    class Probe:
        def __init__(self, value: int) -> None:
            self.value = value

        def __ne__(self, other: object) -> bool:
            seen.append(self.value)
            return self.value != getattr(other, "value", other)

    a = [Probe(1), Probe(2), Probe(3)]
    with pytest.raises(TestFailed):
        Assert.assert_array_equals(a, [1, 5, 3])
    assert seen == [1, 2]


def test_assert_array_subdomain() -> None:
    Assert.assert_array_subdomain("abcdefghijklmnopqrstuvwxyz", "a", "z")
    Assert.assert_array_subdomain([1, 5, 10], 1, 10)
    with pytest.raises(TestFailed):
        Assert.assert_array_subdomain("abcdefghijklmnopqrstuvwxy1", "a", "z")
    with pytest.raises(TestFailed):
        Assert.assert_array_subdomain([0, 5], 1, 10)


def test_assert_array_subdomain_empty_interval() -> None:
    with pytest.raises(TestFailed):
        Assert.assert_array_subdomain([5], 10, 1)
    Assert.assert_array_subdomain([], 10, 1)


def test_assert_array_subdomain_length_limits_check() -> None:
    Assert.assert_array_subdomain([1, 2, 99], 0, 10, length=2)


def test_assert_array_close() -> None:
    actual = np.array([1.0, 2.0], dtype=np.float32)
    Assert.assert_array_close(actual, [1.0, 2.00001])
    with pytest.raises(TestFailed):
        Assert.assert_array_close(actual, [1.0, 3.0])
    with pytest.raises(TestFailed):
        Assert.assert_array_close(actual, [1.0, 2.0, 3.0])


def test_assert_array_close_uses_tolerance() -> None:
    Assert.assert_array_close([1.0, 2.5], [1.0, 2.0], Tolerance(absolute=0.5, relative=0.0))
    with pytest.raises(TestFailed):
        Assert.assert_array_close([1.0, 2.6], [1.0, 2.0], Tolerance(absolute=0.5, relative=0.0))


def test_signals_are_distinct() -> None:
    assert not issubclass(TestPassed, TestFailed)
    assert not issubclass(TestFailed, TestPassed)
    assert str(TestFailed()) == "Test failed"


@pytest.mark.parametrize("len_a, len_b", [(3, 3), (2, 5), (-1, -1)])
def test_assert_array_equals_rejects_lengths_outside_sequence(len_a: int, len_b: int) -> None:
    with pytest.raises(ValueError) as exc:
        Assert.assert_array_equals([1, 2], [1, 2], len_a, len_b)
    assert "outside a sequence of length 2" in str(exc.value)


def test_assert_array_subdomain_rejects_length_outside_sequence() -> None:
    with pytest.raises(ValueError) as exc:
        Assert.assert_array_subdomain([1, 2], 0, 10, length=3)
    assert "length=3" in str(exc.value)
