from __future__ import annotations

import logging
import sys
from typing import Any, List, Optional, TextIO

from utils.eventbus import EventBus, Subscription


logger = logging.getLogger(__name__)


STATUS_EVENTS = ("frame.applied", "frame.rejected", "stream.finished")


class ConsoleSink:
    """Prints decoder status lines to a text stream.

    Subscribes to every status-carrying event on the bus. Each event's
    ``status`` keyword is written as-is, one per line.
    """

    def __init__(self, bus: EventBus, stream: Optional[TextIO] = None) -> None:
        self.bus = bus
        self.stream = stream if stream is not None else sys.stdout
        self._subs: List[Subscription] = [bus.on(event, self._on_status) for event in STATUS_EVENTS]

    def _on_status(self, status: str = "", **_: Any) -> None:
        self.println(status)

    def println(self, msg: str) -> None:
        try:
            self.stream.write(f"{msg}\n")
            self.stream.flush()
        except OSError:
            # If the stream is broken, at least log.
            logger.info(msg)

    def close(self) -> None:
        for sub in self._subs:
            self.bus.off(sub)
        self._subs = []
