from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List


logger = logging.getLogger(__name__)


Callback = Callable[..., Any]


@dataclass(frozen=True)
class Subscription:
    event: str
    callback: Callback


class EventBus:
    """Publishes decoder events to synchronous subscribers.

    Subscribers are called in the order they subscribed, before ``emit``
    returns. A subscriber that raises is logged and skipped; the remaining
    subscribers and the decode loop carry on.
    """

    def __init__(self) -> None:
        self._subs: Dict[str, List[Subscription]] = {}

    def on(self, event: str, callback: Callback) -> Subscription:
        sub = Subscription(event=event, callback=callback)
        self._subs.setdefault(event, []).append(sub)
        return sub

    def off(self, sub: Subscription) -> None:
        remaining = [s for s in self._subs.get(sub.event, []) if s != sub]
        if remaining:
            self._subs[sub.event] = remaining
        else:
            self._subs.pop(sub.event, None)

    def emit(self, event: str, **payload: Any) -> None:
        # snapshot, so subscribers may unsubscribe while being notified
        for sub in list(self._subs.get(event, [])):
            self._safe_invoke(sub, payload)

    def _safe_invoke(self, sub: Subscription, payload: Dict[str, Any]) -> None:
        try:
            sub.callback(**payload)
        except Exception:
            logger.exception("[EventBus] Error in handler for event=%s callback=%r", sub.event, sub.callback)
