"""The cipher wheel used to decode PRT-7 load fragments.

A ``Rotor`` holds the 26 uppercase Latin letters in canonical order and a
rotation offset marking the current "zero position" on the wheel. Map
frames turn the wheel; load frames read through it. Reading letter ``i``
from a wheel turned by ``k`` positions yields letter ``(i + k) mod 26``,
which is a plain Caesar shift.
"""

from __future__ import annotations

import string
from typing import Tuple


class Rotor:
    """A circular substitution wheel with a cumulative rotation offset."""

    RING: Tuple[str, ...] = tuple(string.ascii_uppercase)
    SIZE: int = len(RING)

    def __init__(self) -> None:
        self._offset: int = 0

    @property
    def offset(self) -> int:
        return self._offset

    def current_offset(self) -> int:
        """Return the normalized rotation offset, in ``[0, 26)``."""
        return self._offset

    def rotate(self, n: int) -> int:
        """Turn the wheel ``n`` positions relative to where it is now.

        Negative values turn it the other way. Any integer is accepted; the
        amount is reduced modulo the ring size first.

        :param n: requested rotation
        :return: the effective (normalized) rotation that was applied
        """
        effective = n % self.SIZE
        self._offset = (self._offset + effective) % self.SIZE
        return effective

    def decode(self, symbol: str) -> str:
        """Map a single input symbol through the wheel.

        Spaces and anything outside ``A-Z`` / ``a-z`` are returned as-is.
        Lowercase ASCII letters are treated as their uppercase form.
        """
        if symbol == " " or len(symbol) != 1:
            return symbol
        if "a" <= symbol <= "z":
            symbol = symbol.upper()
        if not ("A" <= symbol <= "Z"):
            return symbol
        index = ord(symbol) - ord("A")
        return self.RING[(self._offset + index) % self.SIZE]

    def render_state(self) -> str:
        """Return the ring read from the current zero position."""
        return "".join(self.RING[self._offset:] + self.RING[:self._offset])

    def __repr__(self) -> str:
        return f"Rotor(offset={self._offset})"


__all__ = ["Rotor"]
