"""Output sinks exporters write rendered text to."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Optional, Union

import click

from enki.errors import SinkUnavailable

logger = logging.getLogger(__name__)


class Sink:
    """Interface for text destinations."""

    def write(self, text: str) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def close(self) -> None:
        """Release the destination. Borrowed destinations are left open."""


class StreamSink(Sink):
    """Writes to a text stream owned by the caller."""

    def __init__(self, stream: IO[str]) -> None:
        self._stream = stream

    @property
    def stream(self) -> IO[str]:
        return self._stream

    def write(self, text: str) -> None:
        self._stream.write(text)


class ConsoleSink(Sink):
    """Writes to standard output.

    ANSI styles are stripped when stdout is not a terminal, unless ``color``
    forces them on or off.
    """

    def __init__(self, *, color: Optional[bool] = None) -> None:
        self._color = color

    def write(self, text: str) -> None:
        click.echo(text, nl=False, color=self._color)


class FileSink(Sink):
    """Owns a text file opened for writing at construction."""

    def __init__(self, path: Union[str, Path], *, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        try:
            self._handle: Optional[IO[str]] = self._path.open("w", encoding=encoding)
        except OSError as exc:
            raise SinkUnavailable(f"Cannot open {self._path} for writing: {exc}") from exc
        logger.debug("opened %s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._handle is None

    def write(self, text: str) -> None:
        if self._handle is None:
            raise ValueError(f"write to closed sink {self._path}")
        self._handle.write(text)

    def close(self) -> None:
        if self._handle is None:
            return
        self._handle.close()
        self._handle = None
        logger.debug("closed %s", self._path)
