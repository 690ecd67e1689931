"""Ordered accumulator for decoded fragments."""

from __future__ import annotations

from typing import Iterator, List, Tuple


class Payload:
    """Append-only sequence of decoded symbols forming the hidden message.

    Symbols keep the position they were appended at. The two render methods
    only read the sequence.
    """

    def __init__(self) -> None:
        self._symbols: List[str] = []

    @property
    def symbols(self) -> Tuple[str, ...]:
        return tuple(self._symbols)

    def append(self, symbol: str) -> None:
        self._symbols.append(symbol)

    def render_partial(self) -> str:
        """Render the message so far with every symbol bracketed, e.g. ``[H][O]``."""
        return "".join(f"[{symbol}]" for symbol in self._symbols)

    def render_final(self) -> str:
        """Render the assembled message with no delimiters."""
        return "".join(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)

    def __repr__(self) -> str:
        return f"Payload({self.render_final()!r})"


__all__ = ["Payload"]
