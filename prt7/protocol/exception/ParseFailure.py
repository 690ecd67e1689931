"""Errors raised when a text line cannot be turned into a frame.

None of these are fatal: the decoder logs the failure, drops the line and
moves on with its state untouched. The concrete variants are attached to
:class:`ParseFailure` as attributes so callers can write
``except ParseFailure.UnknownKind``.
"""

from __future__ import annotations


class ParseFailure(ValueError):
    """Base type for all frame parse failures."""

    def __init__(self, message: str, line: str = "") -> None:
        super().__init__(message)
        self.line = line


class _EmptyLine(ParseFailure):
    """The line was empty after trimming."""

    def __init__(self, line: str = "") -> None:
        super().__init__("Empty line", line)


class _MissingKind(ParseFailure):
    """The line has no frame kind before the first comma."""

    def __init__(self, line: str = "") -> None:
        super().__init__("Missing frame kind", line)


class _MissingArgument(ParseFailure):
    """An ``L`` or ``M`` frame arrived without its argument."""

    def __init__(self, kind: str, line: str = "") -> None:
        super().__init__(f"{kind} frame without argument", line)
        self.kind = kind


class _UnknownKind(ParseFailure):
    """The frame kind is not one the protocol defines."""

    def __init__(self, kind: str, line: str = "") -> None:
        super().__init__(f"Unknown frame kind: {kind}", line)
        self.kind = kind


ParseFailure.EmptyLine = _EmptyLine  # type: ignore[attr-defined]
ParseFailure.MissingKind = _MissingKind  # type: ignore[attr-defined]
ParseFailure.MissingArgument = _MissingArgument  # type: ignore[attr-defined]
ParseFailure.UnknownKind = _UnknownKind  # type: ignore[attr-defined]


__all__ = ["ParseFailure"]
