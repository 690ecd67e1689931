"""Encoding helpers for the PRT-7 protocol.

``FrameEncoder`` writes frames as text lines, one frame per line.
"""

from .FrameEncoder import FrameEncoder  # noqa: F401

__all__ = [
    "FrameEncoder",
]
