"""Exporter interface definitions."""
from __future__ import annotations

from typing import IO, Union

from enki.core.case import TestCase
from enki.core.models import TestRecord

from .formatters import Formatter
from .sinks import Sink, StreamSink


class ResultExporter:
    """Renders the records of a test case to some medium.

    Exporters borrow the test case; they never keep or modify it. Use them as
    context managers, or call :meth:`close`, so that any trailing output is
    written and owned resources are released.
    """

    def __init__(self, export_duration: bool = False) -> None:
        self._export_duration = bool(export_duration)

    @property
    def export_duration(self) -> bool:
        return self._export_duration

    def export_results(self, testcase: TestCase) -> None:
        for record in testcase.get_data():
            self.export_result(record)

    def export_result(self, record: TestRecord) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def close(self) -> None:
        """Finish output. The base exporter holds nothing to release."""

    def __enter__(self) -> "ResultExporter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class StreamResultExporter(ResultExporter):
    """Writes formatted records to a sink.

    A plain text stream is wrapped in a :class:`StreamSink` and is never
    closed by the exporter.
    """

    def __init__(
        self,
        stream: Union[IO[str], Sink],
        formatter: Formatter,
        export_duration: bool = False,
    ) -> None:
        super().__init__(export_duration)
        self._sink = stream if isinstance(stream, Sink) else StreamSink(stream)
        self._formatter = formatter

    @property
    def sink(self) -> Sink:
        return self._sink

    @property
    def formatter(self) -> Formatter:
        return self._formatter

    def export_result(self, record: TestRecord) -> None:
        self._sink.write(self._formatter.format_record(record))
