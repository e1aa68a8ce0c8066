"""Reporting exports."""
from .base import ResultExporter, StreamResultExporter
from .formatters import Formatter, TextFormatter, XmlFormatter
from .sinks import ConsoleSink, FileSink, Sink, StreamSink
from .text_exporter import ConsoleResultExporter, TextFileResultExporter, TextStreamResultExporter
from .xml_exporter import XMLFileResultExporter, XMLStreamResultExporter

__all__ = [
    "ConsoleResultExporter",
    "ConsoleSink",
    "FileSink",
    "Formatter",
    "ResultExporter",
    "Sink",
    "StreamResultExporter",
    "StreamSink",
    "TextFileResultExporter",
    "TextFormatter",
    "TextStreamResultExporter",
    "XMLFileResultExporter",
    "XMLStreamResultExporter",
    "XmlFormatter",
]
