import asyncio
import logging
from collections import defaultdict
from typing import Any

from infinite_wiki.services.navigator import WikiState

logger = logging.getLogger(__name__)


class ContentStore:
    """In-memory pub/sub carrying wiki page updates to WebSocket sessions.

    A session's TopicNavigator publishes a snapshot here on every state
    change; each WebSocket connection of that session drains its own queue.
    """

    def __init__(self):
        self._subscribers: dict[str, list[asyncio.Queue]] = defaultdict(list)

    def subscribe(self, session_id: str) -> asyncio.Queue:
        queue: asyncio.Queue = asyncio.Queue()
        self._subscribers[session_id].append(queue)
        logger.debug(f"Subscriber added for session {session_id}")
        return queue

    def unsubscribe(self, session_id: str, queue: asyncio.Queue):
        queues = self._subscribers.get(session_id)
        if queues is None:
            return
        if queue in queues:
            queues.remove(queue)
        if not queues:
            del self._subscribers[session_id]

    def subscriber_count(self, session_id: str) -> int:
        return len(self._subscribers.get(session_id, []))

    def publish(self, session_id: str, message: dict[str, Any]):
        for queue in self._subscribers.get(session_id, []):
            queue.put_nowait(message)

    def publish_state(self, session_id: str, state: WikiState):
        """Publish a page snapshot as a ``state`` message."""
        self.publish(session_id, {"type": "state", "data": state.model_dump()})


content_store = ContentStore()
