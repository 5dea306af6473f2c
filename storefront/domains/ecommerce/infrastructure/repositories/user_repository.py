"""
User Repository Implementation
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain import DuplicateEntityException
from storefront.models.db import User

logger = logging.getLogger(__name__)


class SQLAlchemyUserRepository:
    """Data access for user accounts."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: int) -> User | None:
        return await self.session.get(User, user_id)

    async def get_by_email(self, email: str) -> User | None:
        result = await self.session.execute(select(User).where(func.lower(User.email) == email.lower()))
        return result.scalar_one_or_none()

    async def add(self, user: User) -> User:
        """
        Insert a new user.

        Raises:
            DuplicateEntityException: If the email is already registered.
        """
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as e:
            logger.info(f"Registration rejected, email already in use: {user.email}")
            raise DuplicateEntityException("User", "email", user.email, "Email is already registered") from e
        return user

    async def save(self, user: User) -> User:
        await self.session.flush()
        return user
