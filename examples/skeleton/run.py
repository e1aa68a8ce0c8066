from enki import ConsoleResultExporter, TestCase


class SkeletonTestCase(TestCase):
    def __init__(self) -> None:
        super().__init__()
        self.add(self.test_pass, "Test pass 1")
        self.add(self.test_failed, "Test fail 1")
        self.add(self.test_pass, "Test pass 2")
        self.add(self.test_empty, "Test empty")

    def test_pass(self) -> None:
        self.pass_()

    def test_failed(self) -> None:
        self.fail()

    def test_empty(self) -> None:
        pass


def main() -> int:
    tcase = SkeletonTestCase()
    failed = tcase.run()
    with ConsoleResultExporter() as exporter:
        exporter.export_results(tcase)
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
