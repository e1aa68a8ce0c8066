import argparse
import string
import time

import numpy as np

from enki import (
    Assert,
    ConsoleResultExporter,
    TestCase,
    TextFileResultExporter,
    Tolerance,
    XMLFileResultExporter,
)


class AssertTestCase(TestCase):
    def __init__(self) -> None:
        super().__init__()
        self.add(self.test_assert, "Assert.assert_()")
        self.add(self.test_assert_exception, "Assert.assert_exception()")
        self.add(self.test_assert_array_equals_pass, "Assert.assert_array_equals() pass")
        self.add(self.test_assert_array_equals_fail, "Assert.assert_array_equals() fail")
        self.add(self.test_assert_array_subdomain_pass, "Assert.assert_array_subdomain() pass")
        self.add(self.test_assert_array_subdomain_fail, "Assert.assert_array_subdomain() fail")
        self.add(self.test_assert_array_close, "Assert.assert_array_close()")
        self.add(self.test_wait, "Timing test, 666ms")

    def test_assert(self) -> None:
        Assert.assert_(True == (not False))

    def test_assert_exception(self) -> None:
        def boom() -> None:
            raise RuntimeError("boom")

        Assert.assert_exception(boom)

    def test_assert_array_equals_pass(self) -> None:
        Assert.assert_array_equals([1, 2, 3, 4, 5], [1, 2, 3, 4, 5])

    def test_assert_array_equals_fail(self) -> None:
        Assert.assert_array_equals([1, 2, 3, 4, 5], [1, 2, 3, 4, 6])

    def test_assert_array_subdomain_pass(self) -> None:
        Assert.assert_array_subdomain(string.ascii_lowercase, "a", "z")

    def test_assert_array_subdomain_fail(self) -> None:
        Assert.assert_array_subdomain(string.ascii_lowercase[:-1] + "1", "a", "z")

    def test_assert_array_close(self) -> None:
        values = np.linspace(0.0, 1.0, 5, dtype=np.float32)
        Assert.assert_array_close(values, [0.0, 0.25, 0.5, 0.75, 1.0], Tolerance(absolute=1e-6))

    def test_wait(self) -> None:
        time.sleep(0.666)


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--log", help="Also write a text report to this file.")
    parser.add_argument("--xml", help="Also write an XML report to this file.")
    args = parser.parse_args()

    tcase = AssertTestCase()
    failed = tcase.run()

    with ConsoleResultExporter(True) as exporter:
        exporter.export_results(tcase)
    if args.log:
        with TextFileResultExporter(args.log, True) as exporter:
            exporter.export_results(tcase)
    if args.xml:
        with XMLFileResultExporter(args.xml, True) as exporter:
            exporter.export_results(tcase)
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
