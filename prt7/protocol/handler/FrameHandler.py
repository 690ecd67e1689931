"""Applies decoded frames to the decoder state.

``FrameHandler`` owns no state of its own; it is bound to the rotor and
payload of one decoder run and turns each frame into a state change plus
a human-readable status line. Dispatch is a type test over the two frame
variants, so adding a third frame type means adding a branch here.
"""

from __future__ import annotations

import logging

from ..data.Payload import Payload
from ..data.Rotor import Rotor
from ..frame.Frame import Frame
from ..frame.LoadFrame import LoadFrame
from ..frame.MapFrame import MapFrame


logger = logging.getLogger(__name__)


class FrameHandler:
    """Routes frames to ``handleLoad`` / ``handleMap``."""

    def __init__(self, rotor: Rotor, payload: Payload, *, show_rotor: bool = True) -> None:
        self.rotor = rotor
        self.payload = payload
        self.show_rotor = show_rotor

    def apply(self, frame: Frame) -> str:
        if isinstance(frame, LoadFrame):
            return self.handleLoad(frame)
        if isinstance(frame, MapFrame):
            return self.handleMap(frame)
        raise TypeError(f"Not a PRT-7 frame: {frame!r}")

    def handleLoad(self, frame: LoadFrame) -> str:
        decoded = self.rotor.decode(frame.symbol)
        self.payload.append(decoded)
        logger.debug("Load %r -> %r (offset=%d)", frame.symbol, decoded, self.rotor.offset)
        return (
            f"Frame [L,{frame.display}] -> fragment '{frame.symbol}' "
            f"decoded as '{decoded}'. Message: {self.payload.render_partial()}"
        )

    def handleMap(self, frame: MapFrame) -> str:
        effective = self.rotor.rotate(frame.offset)
        logger.debug("Map %d (effective %d) -> offset=%d", frame.offset, effective, self.rotor.offset)
        status = f"Frame [M,{frame.offset}] -> rotating rotor {frame.offset:+d} (effective: +{effective})"
        if self.show_rotor:
            status += f". Rotor state: {self.rotor.render_state()}"
        return status


def apply(frame: Frame, rotor: Rotor, payload: Payload) -> str:
    """Apply ``frame`` to ``rotor``/``payload`` and return its status line."""
    return FrameHandler(rotor, payload).apply(frame)


__all__ = ["FrameHandler", "apply"]
