"""User repository for database operations."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User


class UserRepository:
    """Encapsulates user-related database queries."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_external_id(self, external_id: str) -> User | None:
        """Find a user by the authentication provider's subject id."""
        result = await self._session.execute(
            select(User).where(User.external_id == external_id)
        )
        return result.scalar_one_or_none()

    async def create(
        self,
        external_id: str,
        email: str,
        name: str | None = None,
        avatar_url: str | None = None,
    ) -> User:
        """Create a new user record."""
        user = User(
            external_id=external_id,
            email=email,
            name=name,
            avatar_url=avatar_url,
        )
        self._session.add(user)
        await self._session.flush()
        await self._session.refresh(user)
        return user

    async def update_name(self, user: User, name: str) -> User:
        """Change the display name of an existing user."""
        user.name = name
        await self._session.flush()
        await self._session.refresh(user)
        return user

    async def delete(self, user_id: int) -> None:
        """Hard-delete a user; owned rows go with it via ON DELETE CASCADE."""
        await self._session.execute(delete(User).where(User.id == user_id))
