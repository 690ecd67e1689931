"""Line sources feeding the PRT-7 decoder.

A line source yields one text line per call to ``read_line`` and returns
``None`` once the stream is exhausted. Simulation files, serial devices
and in-memory lists are interchangeable behind this interface.
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Iterator, Literal, Optional, TextIO, Union

import serial


logger = logging.getLogger(__name__)


SourceMode = Literal["auto", "sim", "serial"]

DEFAULT_BAUDRATE = 9600


class SourceError(OSError):
    """A line source could not be opened."""


def _strip_terminator(line: str) -> str:
    return line.rstrip("\r\n")


class LineSource(ABC):
    """Sequential, blocking producer of text lines."""

    @abstractmethod
    def read_line(self) -> Optional[str]:
        """Return the next line without its terminator, or ``None`` at end of stream."""

    def close(self) -> None:
        pass

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line

    def __enter__(self) -> "LineSource":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class IterableLineSource(LineSource):
    """Serves lines from any iterable of strings."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)

    def read_line(self) -> Optional[str]:
        line = next(self._lines, None)
        if line is None:
            return None
        return _strip_terminator(line)


class FileLineSource(LineSource):
    """Replays a simulation file, one frame per line."""

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        self.path = Path(path)
        try:
            self._file: Optional[TextIO] = self.path.open("r", encoding="utf-8", errors="ignore")
        except OSError as e:
            raise SourceError(f"Error opening '{self.path}': {e.strerror or e}") from e
        logger.info("Opened simulation file: %s", self.path)

    def read_line(self) -> Optional[str]:
        if self._file is None:
            return None
        line = self._file.readline()
        if line == "":
            return None
        return _strip_terminator(line)

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None


class SerialLineSource(LineSource):
    """Reads frames from a serial device (8N1, blocking reads)."""

    def __init__(self, port: str, baudrate: int = DEFAULT_BAUDRATE) -> None:
        self.port = port
        try:
            self._serial: Optional[serial.Serial] = serial.Serial(port, baudrate, timeout=None)
        except (serial.SerialException, ValueError) as e:
            raise SourceError(f"Error opening serial port '{port}': {e}") from e
        logger.info("Serial connection opened on %s (%d baud)", port, baudrate)

    def read_line(self) -> Optional[str]:
        if self._serial is None:
            return None
        try:
            raw = self._serial.readline()
        except serial.SerialException:
            logger.exception("Serial read failed on %s", self.port)
            return None
        if not raw:
            return None
        return _strip_terminator(raw.decode("utf-8", errors="ignore"))

    def close(self) -> None:
        if self._serial is not None:
            self._serial.close()
            self._serial = None


def open_source(
    path: Union[str, os.PathLike],
    mode: SourceMode = "auto",
    baudrate: int = DEFAULT_BAUDRATE,
) -> LineSource:
    """Open ``path`` as a line source.

    ``sim`` opens a text file and ``serial`` a serial device. ``auto`` picks
    the serial reader for character devices and falls back to the file
    reader for everything else.

    :raises SourceError: if the source cannot be opened
    """
    if mode == "serial":
        return SerialLineSource(str(path), baudrate)
    if mode == "sim":
        return FileLineSource(path)
    if mode != "auto":
        raise ValueError(f"Unknown source mode: {mode!r}")

    if Path(path).is_char_device():
        try:
            return SerialLineSource(str(path), baudrate)
        except SourceError as e:
            logger.warning("%s; falling back to plain file reading", e)
    return FileLineSource(path)


__all__ = [
    "DEFAULT_BAUDRATE",
    "FileLineSource",
    "IterableLineSource",
    "LineSource",
    "SerialLineSource",
    "SourceError",
    "SourceMode",
    "open_source",
]
