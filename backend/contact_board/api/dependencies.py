"""
Request-scoped access to the shared store and notifier
"""
from fastapi.requests import HTTPConnection

from contact_board.repositories.message_repository import MessageStore
from contact_board.services.notification_service import NotificationChannel


def get_store(connection: HTTPConnection) -> MessageStore:
    """Store adapter published on app.state at startup"""
    return connection.app.state.store


def get_notifier(connection: HTTPConnection) -> NotificationChannel:
    """Notification channel published on app.state at startup"""
    return connection.app.state.notifier
