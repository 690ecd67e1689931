"""Writes frames back out as PRT-7 text lines.

This is the inverse of :class:`FrameDecoder`. It is used to render the
example stream in the command-line usage text and to write simulation
files that the decoder can replay.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Union

from ...FrameRegistry import FrameRegistry
from ...frame.Frame import Frame


class FrameEncoder:
    """Encodes frames as ``<kind>,<argument>`` lines."""

    @staticmethod
    def encode(frame: Frame) -> str:
        """Return a single protocol line for ``frame`` (no line terminator)."""
        return FrameRegistry.encode(frame)

    @classmethod
    def encode_all(cls, frames: Iterable[Frame]) -> List[str]:
        return [cls.encode(frame) for frame in frames]

    @classmethod
    def write_file(cls, path: Union[str, os.PathLike], frames: Iterable[Frame]) -> Path:
        """Write ``frames`` to ``path``, one line each, and return the path."""
        path = Path(path)
        lines = cls.encode_all(frames)
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path


__all__ = ["FrameEncoder"]
