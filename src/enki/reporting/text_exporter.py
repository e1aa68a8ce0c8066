"""Plain-text exporters: arbitrary stream, console, and file."""
from __future__ import annotations

from pathlib import Path
from typing import IO, Optional, Union

import colorama

from enki.config import resolve_style

from .base import StreamResultExporter
from .formatters import TextFormatter
from .sinks import ConsoleSink, FileSink, Sink


class TextStreamResultExporter(StreamResultExporter):
    """Exports one line per test, ``[STATUS] <duration>s <name>``.

    ``style`` is ``"colorized"`` or ``"plain"``; ``None`` uses ``ENKI_STYLE``
    or the colorized default.
    """

    def __init__(
        self,
        stream: Union[IO[str], Sink],
        export_duration: bool = False,
        *,
        style: Optional[str] = None,
    ) -> None:
        formatter = TextFormatter(export_duration=export_duration, style=resolve_style(style))
        super().__init__(stream, formatter, export_duration)

    @property
    def style(self) -> str:
        return self._formatter.style  # type: ignore[attr-defined]


class ConsoleResultExporter(TextStreamResultExporter):
    """Text exporter bound to standard output."""

    def __init__(
        self,
        export_duration: bool = False,
        *,
        style: Optional[str] = None,
        color: Optional[bool] = None,
    ) -> None:
        colorama.just_fix_windows_console()
        super().__init__(ConsoleSink(color=color), export_duration, style=style)


class TextFileResultExporter(TextStreamResultExporter):
    """Text exporter owning a file opened at construction.

    Raises :class:`~enki.errors.SinkUnavailable` when the file cannot be
    opened.
    """

    def __init__(
        self,
        filename: Union[str, Path],
        export_duration: bool = False,
        *,
        style: Optional[str] = None,
    ) -> None:
        style = resolve_style(style)
        super().__init__(FileSink(filename), export_duration, style=style)

    def close(self) -> None:
        self._sink.close()
