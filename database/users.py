"""
User repository — the only place that queries the ``users`` table.

Every datastore failure is re-raised as ``PersistenceError`` so callers
never see driver exceptions.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import User
from utils.errors import PersistenceError

logger = logging.getLogger(__name__)

# Fields a user may change through the profile edit route.
EDITABLE_FIELDS = ("first_name", "last_name", "phone", "city_state")


def _to_uuid(value: str | uuid.UUID) -> uuid.UUID:
    return uuid.UUID(value) if isinstance(value, str) else value


class UserRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: str | uuid.UUID) -> Optional[User]:
        try:
            result = await self.session.execute(
                select(User).where(User.user_id == _to_uuid(user_id))
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as exc:
            logger.error("User lookup by id %s failed: %s", user_id, exc)
            raise PersistenceError() from exc

    async def get_by_email(self, email: str) -> Optional[User]:
        try:
            result = await self.session.execute(
                select(User).where(User.email == email)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as exc:
            logger.error("User lookup by email failed: %s", exc)
            raise PersistenceError() from exc

    async def create(
        self,
        *,
        first_name: str,
        last_name: str,
        phone: str,
        city_state: str,
        email: str,
        password_hash: str,
        user_type: str,
    ) -> User:
        """Insert a new user. A duplicate email surfaces as ``PersistenceError``."""
        user = User(
            user_id=uuid.uuid4(),
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            city_state=city_state,
            email=email,
            password_hash=password_hash,
            user_type=user_type,
        )
        try:
            self.session.add(user)
            await self.session.flush()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error("User insert failed: %s", exc)
            raise PersistenceError() from exc
        return user

    async def update_profile(
        self,
        user_id: str | uuid.UUID,
        fields: Dict[str, Any],
    ) -> Optional[User]:
        """
        Update the editable profile fields in one statement and return the
        fresh row, or ``None`` when no user has ``user_id``.
        """
        values = {k: v for k, v in fields.items() if k in EDITABLE_FIELDS}
        stmt = (
            update(User)
            .where(User.user_id == _to_uuid(user_id))
            .values(**values)
            .returning(User)
        )
        try:
            result = await self.session.execute(stmt)
            updated = result.scalar_one_or_none()
            await self.session.flush()
            return updated
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error("Profile update for %s failed: %s", user_id, exc)
            raise PersistenceError() from exc
