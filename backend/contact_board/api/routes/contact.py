"""
Contact form routes
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from contact_board.api.dependencies import get_notifier, get_store
from contact_board.repositories.message_repository import MessageStore
from contact_board.schemas.contact import ContactRequest, ContactResponse, ErrorResponse
from contact_board.services.notification_service import NEW_MESSAGE_EVENT, NotificationChannel

logger = logging.getLogger(__name__)

router = APIRouter()

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def _read_payload(request: Request) -> Dict[str, Any]:
    """JSON body, or the same fields posted as a form"""
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        try:
            form = await request.form()
        except StarletteHTTPException as e:
            raise ValueError(f"Unreadable form body: {e.detail}") from e
        return dict(form)
    return await request.json()


@router.post(
    "/contact",
    response_model=ContactResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": ContactRequest.model_json_schema()}},
            "required": True
        }
    }
)
async def submit_contact(
    request: Request,
    background_tasks: BackgroundTasks,
    store: MessageStore = Depends(get_store),
    notifier: NotificationChannel = Depends(get_notifier)
):
    """
    Store a contact message and announce it to every live subscriber

    - Creates the user on first contact, otherwise overwrites its name
    - Always creates a new message
    - Broadcasts `new-message` after the response is sent
    """
    try:
        contact = ContactRequest.model_validate(await _read_payload(request))
    except ValueError as e:
        logger.warning(f"⚠️ Rejected contact payload: {e}")
        return ORJSONResponse(
            status_code=400,
            content={"success": False, "error": "Invalid request payload"}
        )

    try:
        user = await store.upsert_user(contact.email, contact.name)
        new_message = await store.create_message(contact.subject, contact.message, user.email)

        user_data = user.to_dict()
        message_data = new_message.to_dict()

        background_tasks.add_task(
            notifier.broadcast,
            NEW_MESSAGE_EVENT,
            {"user": user_data, "message": message_data}
        )

        return {
            "success": True,
            "message": "Message sent successfully",
            "data": {"message": message_data, "user": user_data}
        }

    except Exception as e:
        logger.error(f"❌ Error in contact form: {str(e)}", exc_info=True)
        return ORJSONResponse(
            status_code=500,
            content={"success": False, "error": "Internal server error"}
        )
