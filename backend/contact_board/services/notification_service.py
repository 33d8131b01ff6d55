"""
Real-time notification channel over WebSockets
"""
import asyncio
import logging
from typing import Any, Set

import orjson
from fastapi import WebSocket

from contact_board.repositories.message_repository import MessageStore

logger = logging.getLogger(__name__)

NEW_MESSAGE_EVENT = "new-message"
RECENT_MESSAGES_EVENT = "recent-messages"


def encode_event(event: str, data: Any) -> str:
    """Serialize one server->client event frame"""
    return orjson.dumps({"event": event, "data": data}).decode()


class NotificationChannel:
    """
    Broadcast topic delivered to every connected subscriber.

    Only the set of live sockets is kept; nothing else survives a disconnect.
    Delivery is best-effort: a subscriber that fails a send is dropped.
    """

    def __init__(self, store: MessageStore, recent_limit: int = 10):
        self.store = store
        self.recent_limit = recent_limit
        self.connections: Set[WebSocket] = set()
        self._snapshot_tasks: Set[asyncio.Task] = set()

    async def connect(self, websocket: WebSocket) -> None:
        """Accept a subscriber and start sending its recent-messages snapshot"""
        await websocket.accept()
        self.connections.add(websocket)
        logger.info(f"A user connected ({len(self.connections)} active)")

        task = asyncio.create_task(self.send_recent_messages(websocket))
        self._snapshot_tasks.add(task)
        task.add_done_callback(self._snapshot_tasks.discard)

    def disconnect(self, websocket: WebSocket) -> None:
        if websocket in self.connections:
            self.connections.discard(websocket)
            logger.info(f"A user disconnected ({len(self.connections)} active)")

    async def send_recent_messages(self, websocket: WebSocket) -> None:
        """
        Push the most recent messages to one subscriber.
        A store failure is logged and the subscriber simply gets no snapshot.
        """
        try:
            messages = await self.store.list_messages(self.recent_limit)
        except Exception as e:
            logger.error(f"❌ Error fetching recent messages: {e}", exc_info=True)
            return

        payload = [message.to_dict(include_user=True) for message in messages]
        await self._send(websocket, encode_event(RECENT_MESSAGES_EVENT, payload))

    async def broadcast(self, event: str, data: Any) -> None:
        """Send event to every connected subscriber without acknowledgement"""
        if not self.connections:
            return

        frame = encode_event(event, data)
        subscribers = list(self.connections)
        await asyncio.gather(*(self._send(websocket, frame) for websocket in subscribers))
        logger.debug(f"📣 Broadcast '{event}' to {len(subscribers)} subscribers")

    async def close(self) -> None:
        """Stop pending snapshots and close every subscriber"""
        pending = list(self._snapshot_tasks)
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

        for websocket in list(self.connections):
            try:
                await websocket.close(code=1001)
            except Exception as e:
                logger.debug(f"Subscriber already gone on close: {e}")
        self.connections.clear()

    async def _send(self, websocket: WebSocket, frame: str) -> None:
        try:
            await websocket.send_text(frame)
        except Exception as e:
            logger.warning(f"⚠️ Dropping subscriber after failed send: {e}")
            self.disconnect(websocket)
