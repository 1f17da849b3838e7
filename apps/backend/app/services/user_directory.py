"""User directory: registration, credentials and per-user message views."""

import logging

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings
from app.core.exceptions import NotFoundError
from app.core.security import hash_password, verify_password
from app.models.message import Message
from app.models.user import User
from app.schemas.messages import MessageParty, ReceivedMessage, SentMessage
from app.schemas.users import RegisteredUser, UserDetail, UserSummary

logger = logging.getLogger(__name__)


class UserDirectory:
    """
    Data access for the ``users`` table and the message joins hanging off it.

    Every method issues a single statement. Writes commit before returning so
    callers can rely on them being durable.
    """

    def __init__(self, session: AsyncSession, settings: Settings):
        self.session = session
        self.settings = settings

    async def register(
        self,
        username: str,
        password: str,
        first_name: str,
        last_name: str,
        phone: str,
    ) -> RegisteredUser:
        """
        Register a new user.

        The password is stored as a bcrypt digest. ``join_at`` and
        ``last_login_at`` are both stamped with the current time.

        Raises:
            sqlalchemy.exc.IntegrityError: If the username is already taken.
        """
        hashed_password = hash_password(password, self.settings.bcrypt_work_factor)
        result = await self.session.execute(
            insert(User)
            .values(
                username=username,
                password=hashed_password,
                first_name=first_name,
                last_name=last_name,
                phone=phone,
                join_at=func.now(),
                last_login_at=func.now(),
            )
            .returning(
                User.username,
                User.password,
                User.first_name,
                User.last_name,
                User.phone,
            )
        )
        row = result.one()
        await self.session.commit()

        logger.info(f"Registered user {username}")
        return RegisteredUser.model_validate(dict(row._mapping))

    async def authenticate(self, username: str, password: str) -> bool:
        """Is username/password valid? An unknown username is simply False."""
        result = await self.session.execute(
            select(User.password).where(User.username == username)
        )
        hashed_password = result.scalar_one_or_none()

        if hashed_password is None:
            return False
        return verify_password(password, hashed_password)

    async def update_login_timestamp(self, username: str) -> None:
        """Set ``last_login_at`` to now. Unknown usernames are a silent no-op."""
        await self.session.execute(
            update(User)
            .where(User.username == username)
            .values(last_login_at=func.now())
            .execution_options(synchronize_session=False)
        )
        await self.session.commit()

    async def all(self) -> list[UserSummary]:
        """Basic info on all users, ordered by username."""
        result = await self.session.execute(
            select(User.username, User.first_name, User.last_name).order_by(
                User.username
            )
        )
        return [UserSummary.model_validate(dict(row._mapping)) for row in result]

    async def get(self, username: str) -> UserDetail:
        """
        Get a user's profile by username.

        Raises:
            NotFoundError: If no such user exists.
        """
        result = await self.session.execute(
            select(
                User.username,
                User.first_name,
                User.last_name,
                User.phone,
                User.join_at,
                User.last_login_at,
            ).where(User.username == username)
        )
        row = result.one_or_none()

        if row is None:
            raise NotFoundError(f"Username {username} not found")

        return UserDetail.model_validate(dict(row._mapping))

    async def messages_from(self, username: str) -> list[SentMessage]:
        """Messages sent by this user, oldest first, each with its recipient."""
        rows = await self._messages_joined(
            join_on=Message.to_username, where=Message.from_username == username
        )
        return [
            SentMessage(
                id=row.id,
                to_user=_party(row),
                body=row.body,
                sent_at=row.sent_at,
                read_at=row.read_at,
            )
            for row in rows
        ]

    async def messages_to(self, username: str) -> list[ReceivedMessage]:
        """Messages received by this user, oldest first, each with its sender."""
        rows = await self._messages_joined(
            join_on=Message.from_username, where=Message.to_username == username
        )
        return [
            ReceivedMessage(
                id=row.id,
                from_user=_party(row),
                body=row.body,
                sent_at=row.sent_at,
                read_at=row.read_at,
            )
            for row in rows
        ]

    async def _messages_joined(self, join_on, where):
        """Select messages joined to the user on the other end of them."""
        result = await self.session.execute(
            select(
                Message.id,
                User.username,
                User.first_name,
                User.last_name,
                User.phone,
                Message.body,
                Message.sent_at,
                Message.read_at,
            )
            .select_from(User)
            .join(Message, User.username == join_on)
            .where(where)
            .order_by(Message.id)
        )
        return result.all()


def _party(row) -> MessageParty:
    return MessageParty(
        username=row.username,
        first_name=row.first_name,
        last_name=row.last_name,
        phone=row.phone,
    )
