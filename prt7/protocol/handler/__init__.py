from .FrameHandler import FrameHandler, apply  # noqa: F401

__all__ = ["FrameHandler", "apply"]
