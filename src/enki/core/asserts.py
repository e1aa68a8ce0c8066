"""Assertion primitives usable from any test body.

Every method returns ``None`` when its condition holds and raises
:class:`~enki.core.signals.TestFailed` otherwise. None of them need a running
test case.
"""
from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

import numpy as np

from .models import Tolerance
from .signals import TestFailed


class Assert:
    """Namespace of static assertion helpers."""

    @staticmethod
    def assert_(condition: Any) -> None:
        """Fail unless ``condition`` is truthy."""

        if not condition:
            raise TestFailed()

    that = assert_

    @staticmethod
    def assert_exception(operation: Callable[[], Any]) -> None:
        """Fail unless calling ``operation`` raises.

        Any exception counts, as does ``SystemExit``. That includes
        :class:`TestPassed` and :class:`TestFailed` raised by a nested
        ``pass_()``/``fail()``; those are absorbed here and do not reach the
        running test case. ``KeyboardInterrupt`` propagates.
        """

        try:
            operation()
        except (Exception, SystemExit):
            return
        raise TestFailed()

    @staticmethod
    def assert_array_equals(
        a: Sequence[Any],
        b: Sequence[Any],
        len_a: Optional[int] = None,
        len_b: Optional[int] = None,
    ) -> None:
        """Fail unless ``a`` and ``b`` hold equal elements in the same order.

        ``len_a``/``len_b`` limit the comparison to a prefix of each sequence.
        A length larger than its sequence raises ``ValueError``.
        """

        size_a = _prefix_length(a, len_a, "len_a")
        size_b = _prefix_length(b, len_b, "len_b")
        Assert.assert_(size_a == size_b)
        for index in range(size_a):
            if a[index] != b[index]:
                raise TestFailed()

    @staticmethod
    def assert_array_subdomain(
        arr: Sequence[Any],
        minimum: Any,
        maximum: Any,
        length: Optional[int] = None,
    ) -> None:
        """Fail unless every element lies in the closed range ``[minimum, maximum]``."""

        size = _prefix_length(arr, length, "length")
        for index in range(size):
            value = arr[index]
            if value < minimum or value > maximum:
                raise TestFailed()

    @staticmethod
    def assert_array_close(
        actual: Any,
        expected: Any,
        tolerance: Tolerance = Tolerance(),
    ) -> None:
        """Fail unless ``actual`` matches ``expected`` elementwise within ``tolerance``."""

        act = np.asarray(actual)
        exp = np.asarray(expected)
        if act.shape != exp.shape:
            raise TestFailed()
        close = np.isclose(act, exp, atol=tolerance.absolute, rtol=tolerance.relative)
        if not bool(np.all(close)):
            raise TestFailed()


def _prefix_length(seq: Sequence[Any], length: Optional[int], label: str) -> int:
    if length is None:
        return len(seq)
    if length < 0 or length > len(seq):
        raise ValueError(f"{label}={length} is outside a sequence of length {len(seq)}")
    return length
