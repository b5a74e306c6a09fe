"""
Credential store backed by the ``users`` table.
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.errors import DuplicateEmail
from database.models import User

logger = logging.getLogger(__name__)


class CredentialStore:
    """Lookup and insert of accounts within one request's session."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_email(self, email: str) -> Optional[User]:
        result = await self._session.execute(
            select(User).where(User.email == email)
        )
        return result.scalar_one_or_none()

    async def insert(self, name: str, email: str, password_hash: str) -> User:
        """
        Insert a new account and return it with its generated ``id``.

        The row is committed before returning, so callers never report an
        account that is not stored. The unique index on ``users.email``
        decides duplicates; a violation at flush or commit rolls the session
        back and raises ``DuplicateEmail``.
        """
        user = User(name=name, email=email, password=password_hash)
        self._session.add(user)
        try:
            await self._session.flush()
            await self._session.commit()
        except IntegrityError as exc:
            await self._session.rollback()
            logger.info("Rejected duplicate registration for %s", email)
            raise DuplicateEmail() from exc
        return user
