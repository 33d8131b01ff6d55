"""
Message listing routes
"""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import ORJSONResponse

from contact_board.api.dependencies import get_store
from contact_board.repositories.message_repository import MessageStore
from contact_board.schemas.contact import ErrorResponse, MessagesResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/messages", response_model=MessagesResponse, responses={500: {"model": ErrorResponse}})
async def list_messages(store: MessageStore = Depends(get_store)):
    """
    Every message, newest first, each embedding its user
    """
    try:
        messages = await store.list_messages()
        return {
            "success": True,
            "data": [message.to_dict(include_user=True) for message in messages]
        }
    except Exception as e:
        logger.error(f"❌ Error fetching messages: {str(e)}", exc_info=True)
        return ORJSONResponse(
            status_code=500,
            content={"success": False, "error": "Internal server error"}
        )
