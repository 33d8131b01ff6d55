"""
API routes
"""
from .contact import router as contact_router
from .health import router as health_router
from .messages import router as messages_router
from .realtime import router as realtime_router

__all__ = [
    "contact_router",
    "health_router",
    "messages_router",
    "realtime_router",
]
