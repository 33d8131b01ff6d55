"""
Message Repository
Store adapter for contact board users and messages with async support
"""

import logging
from typing import List, Optional

from sqlalchemy import select, text
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker
from sqlalchemy.orm import selectinload

from contact_board.models.base import create_session_factory
from contact_board.models.contact import Message, User

logger = logging.getLogger(__name__)

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class StoreError(Exception):
    """Any failure reaching or writing to the relational store"""


class MessageStore:
    """
    Repository for contact board database operations.

    Owns no connection of its own: every call opens a short-lived session
    from the shared engine handed in at startup.
    """

    def __init__(self, engine: AsyncEngine, session_factory: Optional[async_sessionmaker] = None):
        self.engine = engine
        self.session_factory = session_factory or create_session_factory(engine)

    async def upsert_user(self, email: str, name: str) -> User:
        """
        Create the user for email, or overwrite its name if it already exists
        """
        try:
            async with self.session_factory() as session:
                await session.execute(self._upsert_statement(email, name))
                await session.commit()

                result = await session.execute(
                    select(User)
                    .where(User.email == email)
                    .execution_options(populate_existing=True)
                )
                user = result.scalar_one()

            logger.info(f"✅ Upserted user {email}")
            return user

        except (SQLAlchemyError, OSError) as e:
            logger.error(f"❌ Error upserting user {email}: {e}")
            raise StoreError(str(e)) from e

    async def create_message(self, subject: str, content: str, user_email: str) -> Message:
        """
        Insert a new message stamped with the current time.
        The user must already exist; call upsert_user first.
        """
        try:
            async with self.session_factory() as session:
                message = Message(
                    subject=subject,
                    content=content,
                    user_email=user_email
                )
                session.add(message)
                await session.commit()
                await session.refresh(message)

            logger.info(f"✅ Created message {message.id} from {user_email}")
            return message

        except (SQLAlchemyError, OSError) as e:
            logger.error(f"❌ Error creating message for {user_email}: {e}")
            raise StoreError(str(e)) from e

    async def list_messages(self, limit: Optional[int] = None) -> List[Message]:
        """
        Messages newest first, each with its user loaded. All of them when limit is None.
        """
        try:
            query = (
                select(Message)
                .options(selectinload(Message.user))
                .order_by(Message.created_at.desc(), Message.id.desc())
            )
            if limit is not None:
                query = query.limit(limit)

            async with self.session_factory() as session:
                result = await session.execute(query)
                messages = list(result.scalars().all())

            logger.debug(f"📋 Retrieved {len(messages)} messages")
            return messages

        except (SQLAlchemyError, OSError) as e:
            logger.error(f"❌ Error retrieving messages: {e}")
            raise StoreError(str(e)) from e

    async def ping(self) -> None:
        """Liveness probe. Raises StoreError when the database can't be reached."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            raise StoreError(str(e)) from e

    async def close(self) -> None:
        """Release every pooled connection"""
        await self.engine.dispose()
        logger.info("✅ Database engine disposed")

    def _upsert_statement(self, email: str, name: str):
        dialect = self.engine.dialect.name
        insert = _UPSERT_DIALECTS.get(dialect)
        if insert is None:
            raise StoreError(f"Upsert is not supported for the {dialect} dialect")

        statement = insert(User).values(email=email, name=name)
        return statement.on_conflict_do_update(
            index_elements=[User.email],
            set_={"name": statement.excluded.name}
        )
