"""Base type for PRT-7 frames.

Every frame travels as one text line of the form ``<kind>,<argument>``.
Concrete frames declare their ``KIND`` token, know how to build themselves
from the argument field (``decode``) and how to write that field back out
(``encode``). Frames never touch the rotor or payload themselves; applying
them is the job of :class:`~prt7.protocol.handler.FrameHandler.FrameHandler`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar


class Frame(ABC):
    """A single, immutable protocol instruction."""

    KIND: ClassVar[str]

    @classmethod
    @abstractmethod
    def decode(cls, argument: str) -> "Frame":
        """Build a frame from its trimmed, non-empty argument field."""

    @abstractmethod
    def encode(self) -> str:
        """Return the argument field for this frame."""


__all__ = ["Frame"]
