"""
WebSocket route for the real-time notification channel
"""
from fastapi import APIRouter, Depends, WebSocket

from contact_board.api.dependencies import get_notifier
from contact_board.services.notification_service import NotificationChannel

router = APIRouter()


@router.websocket("/ws")
async def subscribe(websocket: WebSocket, notifier: NotificationChannel = Depends(get_notifier)):
    """
    Subscribe to `new-message` broadcasts.
    A `recent-messages` snapshot is pushed once right after connecting.
    """
    await notifier.connect(websocket)
    try:
        while True:
            # Client frames carry nothing we act on
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
    finally:
        notifier.disconnect(websocket)
