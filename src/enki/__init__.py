"""enki: a small unit-testing framework with pluggable result exporters."""
from __future__ import annotations

from .core import (
    Assert,
    AssertionFailed,
    Outcome,
    TestCase,
    TestFailed,
    TestPassed,
    TestPassedEarly,
    TestRecord,
    Tolerance,
)
from .errors import ConfigError, EnkiError, SinkUnavailable
from .reporting import (
    ConsoleResultExporter,
    ResultExporter,
    StreamResultExporter,
    TextFileResultExporter,
    TextStreamResultExporter,
    XMLFileResultExporter,
    XMLStreamResultExporter,
)
from .version import __version__

__all__ = [
    "__version__",
    "Assert",
    "AssertionFailed",
    "ConfigError",
    "ConsoleResultExporter",
    "EnkiError",
    "Outcome",
    "ResultExporter",
    "SinkUnavailable",
    "StreamResultExporter",
    "TestCase",
    "TestFailed",
    "TestPassed",
    "TestPassedEarly",
    "TestRecord",
    "TextFileResultExporter",
    "TextStreamResultExporter",
    "Tolerance",
    "XMLFileResultExporter",
    "XMLStreamResultExporter",
]
