"""Frame variants of the PRT-7 protocol.

The protocol has exactly two frames: :class:`LoadFrame` and
:class:`MapFrame`. Both are frozen dataclasses, compared by value.
"""

from .Frame import Frame  # noqa: F401
from .LoadFrame import LoadFrame  # noqa: F401
from .MapFrame import MapFrame  # noqa: F401

__all__ = [
    "Frame",
    "LoadFrame",
    "MapFrame",
]
