"""Decoding helpers for the PRT-7 protocol.

``FrameDecoder`` turns one text line into a frame object, raising a
``ParseFailure`` when the line does not describe a valid frame.
"""

from .FrameDecoder import FrameDecoder, parse  # noqa: F401

__all__ = [
    "FrameDecoder",
    "parse",
]
