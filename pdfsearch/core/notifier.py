"""
Chat completion notifications.

Fire-and-forget delivery of ChatCompletedEvent to in-process listeners
(e.g. a websocket bridge). A failing listener is logged and skipped.

Dependencies: pdfsearch.models.chat
System role: Outbound notification hook
"""

import logging
from collections.abc import Callable

from pdfsearch.models.chat import ChatCompletedEvent

logger = logging.getLogger(__name__)

Listener = Callable[[ChatCompletedEvent], None]


class ChatNotifier:
    """Registry of chat completion listeners."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def publish(self, event: ChatCompletedEvent) -> None:
        """Deliver an event to every listener; delivery is not guaranteed."""
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as e:
                logger.warning(
                    f"{__name__}:publish - Listener failed: {type(e).__name__}: {e}",
                    extra={"chat_id": str(event.chat_id)},
                )
