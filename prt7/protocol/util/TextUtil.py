"""Text helpers shared by the frame codecs."""

from __future__ import annotations

import re

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parseLenientInt(text: str) -> int:
    """Parse the leading signed integer of ``text``.

    Leading whitespace and a single sign are accepted, parsing stops at the
    first non-digit, and text without leading digits is read as ``0``. This
    is the permissive behaviour map frames rely on (``"3x"`` is 3,
    ``"abc"`` is 0).
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    return int(match.group(1))


def firstField(text: str) -> str:
    """Return the first non-empty comma-separated field of ``text``, trimmed.

    Empty fields are skipped, so ``",A"`` gives ``"A"``; text with no
    non-blank field gives ``""``.
    """
    return next((field.strip() for field in text.split(",") if field.strip()), "")


__all__ = ["parseLenientInt", "firstField"]
