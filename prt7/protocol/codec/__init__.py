from .decoder import FrameDecoder, parse  # noqa: F401
from .encoder import FrameEncoder  # noqa: F401

__all__ = ["FrameDecoder", "FrameEncoder", "parse"]
