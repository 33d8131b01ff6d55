"""
Health check route
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import ORJSONResponse

from contact_board.api.dependencies import get_store
from contact_board.repositories.message_repository import MessageStore

router = APIRouter()


@router.get("/health")
async def health_check(store: MessageStore = Depends(get_store)):
    """Health check backed by a store probe"""
    try:
        await store.ping()
        return {
            "status": "ok",
            "database": "connected",
            "timestamp": datetime.now(timezone.utc).isoformat()
        }
    except Exception as e:
        return ORJSONResponse(
            status_code=500,
            content={
                "status": "error",
                "database": "disconnected",
                "error": str(e)
            }
        )
