"""Rotor rotation frame (``M,<integer>``)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .Frame import Frame
from ..util.TextUtil import parseLenientInt


@dataclass(frozen=True)
class MapFrame(Frame):
    """Turns the rotor by ``offset`` positions, relative to its current one.

    ``offset`` may be negative or larger than the ring; the rotor reduces it.
    """

    KIND: ClassVar[str] = "M"

    offset: int

    @classmethod
    def decode(cls, argument: str) -> "MapFrame":
        return cls(parseLenientInt(argument))

    def encode(self) -> str:
        return str(self.offset)


__all__ = ["MapFrame"]
