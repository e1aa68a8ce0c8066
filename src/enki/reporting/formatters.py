"""Stateless renderers turning test records into text."""
from __future__ import annotations

from typing import Iterable
from xml.sax.saxutils import escape

from colorama import Fore, Style

from enki.config import STYLE_COLORIZED, STYLE_PLAIN, validate_style
from enki.core.models import TestRecord


STATUS_TOKENS = {
    STYLE_COLORIZED: (
        f"{Fore.GREEN}PASSED{Style.RESET_ALL}",
        f"{Fore.RED}FAILED{Style.RESET_ALL}",
    ),
    STYLE_PLAIN: ("passed", "FAILED"),
}

DURATION_WIDTH = 8


class Formatter:
    """Renders a document header, records, and a footer."""

    def __init__(self, *, export_duration: bool = False) -> None:
        self._export_duration = export_duration

    @property
    def export_duration(self) -> bool:
        return self._export_duration

    def begin(self) -> str:
        return ""

    def end(self) -> str:
        return ""

    def format_record(self, record: TestRecord) -> str:  # pragma: no cover - interface
        raise NotImplementedError

    def format_case(self, records: Iterable[TestRecord]) -> str:
        return "".join(self.format_record(record) for record in records)


class TextFormatter(Formatter):
    """One line per record: ``[STATUS] <duration>s <name>``."""

    def __init__(self, *, export_duration: bool = False, style: str = STYLE_COLORIZED) -> None:
        super().__init__(export_duration=export_duration)
        self._style = validate_style(style)

    @property
    def style(self) -> str:
        return self._style

    def status_token(self, passed: bool) -> str:
        passed_token, failed_token = STATUS_TOKENS[self._style]
        return passed_token if passed else failed_token

    def format_record(self, record: TestRecord) -> str:
        line = f"[{self.status_token(record.passed)}] "
        if self._export_duration:
            line += f"{record.duration:>{DURATION_WIDTH}g}s "
        return f"{line}{record.name}\n"


class XmlFormatter(Formatter):
    """``<test-results>`` document with one ``<test-case>`` per exported case."""

    PROLOGUE = '<?xml version="1.0" encoding="utf-8"?>\n<test-results>\n'
    EPILOGUE = "</test-results>\n"

    def begin(self) -> str:
        return self.PROLOGUE

    def end(self) -> str:
        return self.EPILOGUE

    def format_record(self, record: TestRecord) -> str:
        result = "passed" if record.passed else "failed"
        parts = [f'\t\t<test result="{result}"']
        if self._export_duration:
            parts.append(f' duration="{record.duration:g}"')
        parts.append(f' name="{_attr(record.name)}"/>\n')
        return "".join(parts)

    def format_case(self, records: Iterable[TestRecord]) -> str:
        return "\t<test-case>\n" + super().format_case(records) + "\t</test-case>\n"


def _attr(value: str) -> str:
    return escape(value, {'"': "&quot;"})
