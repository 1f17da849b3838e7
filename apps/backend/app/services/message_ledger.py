"""Message ledger: writes to the ``messages`` table."""

import logging

from sqlalchemy import func, insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.message import Message
from app.schemas.messages import MessageRecord

logger = logging.getLogger(__name__)


class MessageLedger:
    """Creates messages. Reads go through ``UserDirectory``."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(
        self, from_username: str, to_username: str, body: str
    ) -> MessageRecord:
        """
        Store a new message, stamped with the current time and left unread.

        Raises:
            sqlalchemy.exc.IntegrityError: If either user does not exist.
        """
        result = await self.session.execute(
            insert(Message)
            .values(
                from_username=from_username,
                to_username=to_username,
                body=body,
                sent_at=func.now(),
            )
            .returning(
                Message.id,
                Message.from_username,
                Message.to_username,
                Message.body,
                Message.sent_at,
                Message.read_at,
            )
        )
        row = result.one()
        await self.session.commit()

        logger.info(f"Message {row.id} sent from {from_username} to {to_username}")
        return MessageRecord.model_validate(dict(row._mapping))
