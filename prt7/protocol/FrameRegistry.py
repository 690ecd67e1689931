"""Lookup table between frame kind tokens and frame types.

The decoder asks the registry which frame type a kind token names; the
encoder asks it for the token that introduces a frame. Kind tokens are
matched case-insensitively (``l,a`` is a load frame).
"""

from __future__ import annotations

from typing import Dict, Optional, Type

from .exception.ParseFailure import ParseFailure
from .frame.Frame import Frame
from .frame.LoadFrame import LoadFrame
from .frame.MapFrame import MapFrame


class FrameRegistry:
    """Class-level registry of the protocol's frame types."""

    _by_kind: Dict[str, Type[Frame]] = {}

    @classmethod
    def register(cls, frame_type: Type[Frame]) -> None:
        cls._by_kind[frame_type.KIND.upper()] = frame_type

    @classmethod
    def get(cls, kind: str) -> Optional[Type[Frame]]:
        return cls._by_kind.get(kind.upper())

    @classmethod
    def lookup(cls, kind: str, line: str = "") -> Type[Frame]:
        """Return the frame type for ``kind``.

        :raises ParseFailure.UnknownKind: if no frame uses this token
        """
        frame_type = cls.get(kind)
        if frame_type is None:
            raise ParseFailure.UnknownKind(kind, line)
        return frame_type

    @classmethod
    def kinds(cls) -> list[str]:
        return sorted(cls._by_kind)

    @classmethod
    def encode(cls, frame: Frame) -> str:
        """Return ``frame`` as a protocol line, ``<kind>,<argument>``."""
        if cls.get(frame.KIND) is not type(frame):
            raise TypeError(f"Unregistered frame type: {type(frame).__name__}")
        return f"{frame.KIND},{frame.encode()}"


FrameRegistry.register(LoadFrame)
FrameRegistry.register(MapFrame)


__all__ = ["FrameRegistry"]
