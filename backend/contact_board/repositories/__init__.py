"""
Repositories package - Database access layer
"""

from .message_repository import MessageStore, StoreError

__all__ = ['MessageStore', 'StoreError']
