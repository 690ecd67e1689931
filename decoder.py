from __future__ import annotations

import logging
from typing import Optional

from prt7.protocol.codec.decoder import FrameDecoder
from prt7.protocol.data import Payload, Rotor
from prt7.protocol.exception import ParseFailure
from prt7.protocol.handler import FrameHandler
from source import LineSource
from utils.eventbus import EventBus


logger = logging.getLogger(__name__)


class Decoder:
    """Runs the PRT-7 decode loop for one stream.

    Owns the rotor and payload for the whole run. Every line goes through
    the frame decoder; good frames are applied and their status published
    on ``frame.applied``, bad ones are reported on ``frame.rejected`` and
    dropped. Blank lines are skipped without a status.
    """

    def __init__(
        self,
        bus: Optional[EventBus] = None,
        *,
        rotor: Optional[Rotor] = None,
        payload: Optional[Payload] = None,
        show_rotor: bool = True,
    ) -> None:
        self.bus = bus if bus is not None else EventBus()
        self.rotor = rotor if rotor is not None else Rotor()
        self.payload = payload if payload is not None else Payload()
        self.handler = FrameHandler(self.rotor, self.payload, show_rotor=show_rotor)

    def on_receive(self, line: str) -> Optional[str]:
        """Process one line and return its status, or ``None`` for a blank line."""
        self.bus.emit("line.received", line=line)
        try:
            frame = FrameDecoder.decode(line)
        except ParseFailure.EmptyLine:
            logger.debug("Skipping empty line")
            return None
        except ParseFailure as e:
            logger.warning("Rejected frame %r: %s", line, e)
            status = f"Frame received: [{line.strip()}] -> {e}. Invalid frame, ignored."
            self.bus.emit("frame.rejected", line=line, failure=e, status=status)
            return status

        status = self.handler.apply(frame)
        self.bus.emit("frame.applied", frame=frame, status=status)
        return status

    def finish(self) -> str:
        message = self.payload.render_final()
        logger.info("Stream finished: %d fragment(s) assembled", len(self.payload))
        status = f"---\nData stream finished.\nHIDDEN MESSAGE ASSEMBLED:\n{message}\n---"
        self.bus.emit("stream.finished", message=message, status=status)
        return message

    def run(self, source: LineSource) -> str:
        """Consume ``source`` to end of stream and return the assembled message."""
        while True:
            line = source.read_line()
            if line is None:
                break
            self.on_receive(line)
        return self.finish()
