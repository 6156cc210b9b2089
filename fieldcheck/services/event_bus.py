"""Event bus — deferred in-process pub/sub for validation notifications."""

from collections import defaultdict, deque
from typing import Any, Callable, Deque, Dict, List, Optional, Tuple

import structlog

from fieldcheck.config import get_settings

logger = structlog.get_logger()

# Type alias for event listeners
EventListener = Callable[..., None]


class EventBus:
    """Queue-backed pub/sub used by models to notify views.

    ``publish`` only queues the message; listeners run when ``flush`` is
    called. Messages for topics nobody listens to are not queued, and the
    queue keeps at most ``max_pending`` messages, dropping the oldest.
    A listener that raises is logged and removed.
    """

    def __init__(self, max_pending: Optional[int] = None):
        self._listeners: Dict[str, List[EventListener]] = defaultdict(list)
        self._max_pending = max_pending or get_settings().EVENT_QUEUE_LIMIT
        self._pending: Deque[Tuple[str, Tuple[Any, ...]]] = deque(maxlen=self._max_pending)

    def subscribe(self, topic: str, listener: EventListener) -> None:
        """Subscribe a listener to a topic. Subscribing twice is a no-op."""
        if listener not in self._listeners[topic]:
            self._listeners[topic].append(listener)
        logger.debug("event_bus_subscribe", topic=topic, total_listeners=len(self._listeners[topic]))

    def unsubscribe(self, topic: str, listener: EventListener) -> None:
        """Unsubscribe a listener from a topic."""
        listeners = self._listeners.get(topic)
        if not listeners:
            return
        if listener in listeners:
            listeners.remove(listener)
        if not listeners:
            del self._listeners[topic]

    def publish(self, topic: str, *args: Any) -> None:
        """Queue a message for every current listener of ``topic``."""
        if not self._listeners.get(topic):
            return
        if len(self._pending) == self._max_pending:
            logger.warning("event_queue_full", topic=topic, max_pending=self._max_pending)
        self._pending.append((topic, args))

    @property
    def pending(self) -> int:
        """Number of queued, undelivered messages."""
        return len(self._pending)

    def flush(self) -> int:
        """Deliver queued messages in publish order.

        Messages published by listeners during the flush are delivered too.

        Returns:
            Number of messages delivered
        """
        delivered = 0
        while self._pending:
            topic, args = self._pending.popleft()
            dead_listeners = []
            for listener in list(self._listeners.get(topic, [])):
                try:
                    listener(*args)
                except Exception as e:
                    logger.warning("event_listener_failed", topic=topic, error=str(e))
                    dead_listeners.append(listener)

            for dead in dead_listeners:
                self.unsubscribe(topic, dead)
            delivered += 1

        return delivered

    def clear(self) -> None:
        """Drop all queued messages and listeners."""
        self._pending.clear()
        self._listeners.clear()
