from collections import defaultdict
import logging
from typing import Callable, DefaultDict, List, Type


Handler = Callable[[object], None]


class EventBus:
    """Synchronous publish/subscribe keyed by event class.

    Handlers run in (priority, subscription order). A failing handler is
    logged and isolated so one listener can't stall the location loop.
    """

    def __init__(self) -> None:
        self._subscribers: DefaultDict[Type[object], List[tuple[int, int, Handler]]] = defaultdict(list)
        self._next_order = 0
        self._last_publish_errors: List[Exception] = []
        self._logger = logging.getLogger(__name__)

    def subscribe(self, event_type: Type[object], handler: Handler, *, priority: int = 100) -> None:
        rows = self._subscribers[event_type]
        rows.append((int(priority), self._next_order, handler))
        rows.sort(key=lambda row: (row[0], row[1]))
        self._next_order += 1

    def unsubscribe(self, event_type: Type[object], handler: Handler) -> bool:
        rows = self._subscribers.get(event_type, [])
        kept = [row for row in rows if row[2] is not handler]
        removed = len(kept) != len(rows)
        self._subscribers[event_type] = kept
        return removed

    def publish(self, event: object) -> None:
        self._last_publish_errors = []
        event_type = type(event)
        for priority, _, handler in list(self._subscribers.get(event_type, [])):
            try:
                handler(event)
            except Exception as exc:
                self._last_publish_errors.append(exc)
                self._logger.exception(
                    "Handler for %s failed and was isolated",
                    event_type.__name__,
                    extra={
                        "handler": getattr(handler, "__qualname__", repr(handler)),
                        "priority": priority,
                    },
                )

    def last_publish_errors(self) -> List[Exception]:
        return list(self._last_publish_errors)
