"""User directory: maps auth-provider identities to local users."""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import UserNotFoundError
from app.models.user import User
from app.repositories.user_repo import UserRepository
from app.schemas.user_schema import UpdateProfileRequest, UserProfileResponse

logger = structlog.get_logger()


async def resolve_user(user_repo: UserRepository, external_id: str) -> User:
    """Return the local user for an external subject or raise UserNotFoundError."""
    user = await user_repo.find_by_external_id(external_id)
    if user is None:
        raise UserNotFoundError
    return user


class UserService:
    """Profile synchronization, updates and account deletion."""

    def __init__(self, user_repo: UserRepository, session: AsyncSession) -> None:
        self._user_repo = user_repo
        self._session = session

    async def get_or_create(
        self,
        external_id: str,
        email: str | None,
        name: str | None = None,
        avatar_url: str | None = None,
    ) -> UserProfileResponse:
        """Return the caller's profile, creating the local row on first sight."""
        user = await self._user_repo.find_by_external_id(external_id)
        if user is None:
            user = await self._user_repo.create(
                external_id=external_id,
                email=email or "",
                name=name,
                avatar_url=avatar_url,
            )
            await self._session.commit()
            logger.info("User synchronized", user_id=user.id)
        return UserProfileResponse.model_validate(user)

    async def update_profile(
        self, external_id: str, request: UpdateProfileRequest
    ) -> UserProfileResponse:
        """Apply profile changes for an already synchronized user."""
        user = await resolve_user(self._user_repo, external_id)
        if request.name is not None:
            user = await self._user_repo.update_name(user, request.name)
            await self._session.commit()
        return UserProfileResponse.model_validate(user)

    async def delete_account(self, external_id: str) -> None:
        """Remove the user together with every row they own."""
        user = await resolve_user(self._user_repo, external_id)
        await self._user_repo.delete(user.id)
        await self._session.commit()
        logger.info("User account deleted", user_id=user.id)
