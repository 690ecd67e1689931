"""The PRT-7 frame protocol: frames, codecs, and the cipher state they drive."""

from .FrameRegistry import FrameRegistry  # noqa: F401
from .codec import FrameDecoder, FrameEncoder, parse  # noqa: F401
from .data import Payload, Rotor  # noqa: F401
from .exception import ParseFailure  # noqa: F401
from .frame import Frame, LoadFrame, MapFrame  # noqa: F401
from .handler import FrameHandler, apply  # noqa: F401

__all__ = [
    "Frame",
    "FrameDecoder",
    "FrameEncoder",
    "FrameHandler",
    "FrameRegistry",
    "LoadFrame",
    "MapFrame",
    "ParseFailure",
    "Payload",
    "Rotor",
    "apply",
    "parse",
]
