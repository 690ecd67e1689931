"""Data fragment frame (``L,<letter>`` or ``L,Space``)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .Frame import Frame
from ..exception.ParseFailure import ParseFailure


@dataclass(frozen=True)
class LoadFrame(Frame):
    """Carries one enciphered symbol to be decoded and appended."""

    KIND: ClassVar[str] = "L"
    SPACE_TOKEN: ClassVar[str] = "Space"

    symbol: str

    @classmethod
    def decode(cls, argument: str) -> "LoadFrame":
        """Build a load frame from its argument.

        The literal token ``Space`` (any case) stands for a space. Otherwise
        only the first character is kept; anything after it is ignored.

        :raises ParseFailure.MissingArgument: if ``argument`` is empty
        """
        if not argument:
            raise ParseFailure.MissingArgument(cls.KIND)
        if argument.lower() == cls.SPACE_TOKEN.lower():
            return cls(" ")
        return cls(argument[0])

    def encode(self) -> str:
        return self.SPACE_TOKEN if self.symbol == " " else self.symbol

    @property
    def display(self) -> str:
        """The symbol as shown in status output."""
        return self.encode()


__all__ = ["LoadFrame"]
