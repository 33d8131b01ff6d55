"""
Services for the Contact Board service
"""
from .notification_service import NEW_MESSAGE_EVENT, RECENT_MESSAGES_EVENT, NotificationChannel

__all__ = [
    "NEW_MESSAGE_EVENT",
    "RECENT_MESSAGES_EVENT",
    "NotificationChannel",
]
