"""XML exporters.

Document layout::

    <?xml version="1.0" encoding="utf-8"?>
    <test-results>
        <test-case>
            <test result="passed" duration="0.25" name="demo"/>
        </test-case>
    </test-results>

The prologue is written when the exporter is created and the closing
``</test-results>`` tag when it is closed, so the document is only complete
after :meth:`close` (or leaving a ``with`` block).
"""
from __future__ import annotations

from pathlib import Path
from typing import IO, Union

from enki.core.case import TestCase
from enki.core.models import TestRecord

from .base import ResultExporter, StreamResultExporter
from .formatters import XmlFormatter
from .sinks import FileSink, Sink


class XMLStreamResultExporter(StreamResultExporter):
    """Writes an XML results document to a borrowed stream."""

    def __init__(self, stream: Union[IO[str], Sink], export_duration: bool = False) -> None:
        super().__init__(stream, XmlFormatter(export_duration=export_duration), export_duration)
        self._closed = False
        self._sink.write(self._formatter.begin())

    @property
    def closed(self) -> bool:
        return self._closed

    def export_results(self, testcase: TestCase) -> None:
        self._check_open()
        self._sink.write(self._formatter.format_case(testcase.get_data()))

    def export_result(self, record: TestRecord) -> None:
        self._check_open()
        super().export_result(record)

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("export to closed exporter")

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._sink.write(self._formatter.end())


class XMLFileResultExporter(ResultExporter):
    """Writes an XML results document to a file it owns."""

    def __init__(self, filename: Union[str, Path], export_duration: bool = False) -> None:
        super().__init__(export_duration)
        self._sink = FileSink(filename)
        try:
            self._exporter = XMLStreamResultExporter(self._sink, export_duration)
        except BaseException:
            self._sink.close()
            raise

    @property
    def path(self) -> Path:
        return self._sink.path

    def export_results(self, testcase: TestCase) -> None:
        self._exporter.export_results(testcase)

    def export_result(self, record: TestRecord) -> None:
        self._exporter.export_result(record)

    def close(self) -> None:
        try:
            self._exporter.close()
        finally:
            self._sink.close()
