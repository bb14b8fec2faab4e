"""User repository (catalog-side user records; no credentials)."""

from __future__ import annotations

from sqlalchemy import insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.constants import ID_PREFIX_USER
from app.domain.exceptions import InvariantException, UserNotFoundError
from app.infrastructure.persistence.models.user import User
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.generators import generate_id


class UserRepository(BaseRepository[User]):
    """Users are not cached; nothing derived from them is invalidated here."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def add_user(self, username: str, fullname: str) -> str:
        """Create a user and return its id. Raises InvariantException on duplicate username."""
        user_id = generate_id(ID_PREFIX_USER)
        try:
            await self.db.execute(
                insert(User).values(id=user_id, username=username, fullname=fullname)
            )
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise InvariantException(
                "Username already taken", {"username": username}
            ) from e
        return user_id

    async def verify_user_exists(self, user_id: str) -> None:
        """Raise UserNotFoundError if the user does not exist."""
        if not await self.exists(user_id):
            raise UserNotFoundError(user_id)
