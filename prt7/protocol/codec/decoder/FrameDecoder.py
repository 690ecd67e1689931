"""Text line decoder for the PRT-7 protocol.

A PRT-7 line is ``<kind>,<argument>`` with optional whitespace around
each field. The decoder trims the line, splits off the kind token at the
first comma, resolves it through :class:`FrameRegistry` and lets the frame
type build itself from the argument. The argument is the first
non-empty field after the kind, so ``L,Space,junk`` still carries a space
and ``L,,A`` loads ``A``.

The decoder is stateless: it never sees the rotor or the payload, and a
failed parse cannot change them.
"""

from __future__ import annotations

from ...FrameRegistry import FrameRegistry
from ...exception.ParseFailure import ParseFailure
from ...frame.Frame import Frame
from ...util.TextUtil import firstField


class FrameDecoder:
    """Turns text lines into frame objects."""

    SEPARATOR = ","

    @classmethod
    def decode(cls, line: str) -> Frame:
        """Decode one line into a frame.

        :param line: a raw or trimmed text line
        :return: a :class:`LoadFrame` or :class:`MapFrame`
        :raises ParseFailure.EmptyLine: if the line is blank
        :raises ParseFailure.MissingKind: if nothing precedes the first comma
        :raises ParseFailure.UnknownKind: if the kind token is not ``L``/``M``
        :raises ParseFailure.MissingArgument: if the argument is absent or blank
        """
        text = line.strip()
        if not text:
            raise ParseFailure.EmptyLine(line)

        kind, sep, rest = text.partition(cls.SEPARATOR)
        kind = kind.strip()
        if not kind:
            raise ParseFailure.MissingKind(line)

        frame_type = FrameRegistry.lookup(kind, line)
        if not sep:
            raise ParseFailure.MissingArgument(frame_type.KIND, line)

        argument = firstField(rest)
        if not argument:
            raise ParseFailure.MissingArgument(frame_type.KIND, line)
        return frame_type.decode(argument)


def parse(line: str) -> Frame:
    """Shorthand for :meth:`FrameDecoder.decode`."""
    return FrameDecoder.decode(line)


__all__ = ["FrameDecoder", "parse"]
