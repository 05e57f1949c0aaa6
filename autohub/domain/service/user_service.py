"""User domain service."""

from typing import List, Optional
from uuid import uuid4

import logfire

from autohub.domain.error import BusinessRuleViolationError, NotFoundError
from autohub.domain.model import SecuritySettings, User
from autohub.domain.model.common import utcnow
from autohub.domain.policy import can_administer, require
from autohub.domain.repository import UserRepository
from autohub.domain.value import ActivityType, Caller, UserId, UserRole, UserStatus

from .activity_service import ActivityService
from .base import Service
from .question_service import QuestionService


class UserService(Service):
    """Domain service for user profile operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        activity_service: ActivityService,
        question_service: QuestionService,
        seed_admin_emails: Optional[list[str]] = None,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            activity_service: Activity log service
            question_service: Used to withdraw a deleted user's answers and votes
            seed_admin_emails: Emails that always register as Administrator
        """
        self.user_repository = user_repository
        self.activity_service = activity_service
        self.question_service = question_service
        self.seed_admin_emails = {e.strip().lower() for e in seed_admin_emails or []}

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user doesn't exist
        """
        user = await self.user_repository.find_by_id(user_id)
        if not user:
            raise NotFoundError("User", str(user_id))
        return user

    async def get_caller(self, user_id: UserId) -> Caller:
        """Identity of an authenticated user, with their current role and status.

        Raises:
            NotFoundError: If user doesn't exist
        """
        return (await self.get_by_id(user_id)).as_caller()

    async def register(
        self, name: str, email: str, security: SecuritySettings
    ) -> User:
        """Create a profile for a newly signed-up user.

        Seed administrators bypass the registration switch and get the
        Administrator role; everyone else gets the configured default role.

        Raises:
            BusinessRuleViolationError: If registration is closed or the
                email is already registered
        """
        with logfire.span("register_user", email=email):
            normalized = email.strip().lower()
            is_seed_admin = normalized in self.seed_admin_emails

            if not security.allow_registration and not is_seed_admin:
                logfire.warn("Registration attempt while closed", email=normalized)
                raise BusinessRuleViolationError("Registration is currently disabled")

            if await self.user_repository.find_by_email(normalized):
                raise BusinessRuleViolationError(f"Email already registered: {normalized}")

            user = User(
                id=UserId(uuid4()),
                name=name.strip(),
                email=normalized,
                role=UserRole.ADMINISTRATOR if is_seed_admin else security.default_user_role,
            )
            saved = await self.user_repository.save(user)

            await self.activity_service.log(
                f"New user registered: {saved.name}",
                ActivityType.USER,
                related_id=str(saved.id),
                user_id=saved.id,
            )
            logfire.info("User registered", user_id=str(saved.id), role=saved.role.value)
            return saved

    async def create_user(
        self, caller: Caller, name: str, email: str, role: UserRole
    ) -> User:
        """Create a verified user on behalf of an administrator.

        Raises:
            PermissionDeniedError: If caller is not an administrator
            BusinessRuleViolationError: If the email is already registered
        """
        require(can_administer(caller), caller, "create", "user", "new")
        normalized = email.strip().lower()
        if await self.user_repository.find_by_email(normalized):
            raise BusinessRuleViolationError(f"Email already registered: {normalized}")

        user = await self.user_repository.save(
            User(
                id=UserId(uuid4()),
                name=name.strip(),
                email=normalized,
                role=role,
                verified=True,
            )
        )
        await self.activity_service.log(
            f"User created by administrator: {user.name}",
            ActivityType.USER,
            related_id=str(user.id),
            user_id=caller.user_id,
        )
        return user

    async def list_users(
        self, caller: Caller, limit: int = 20, offset: int = 0
    ) -> tuple[List[User], int]:
        """List users, newest first.

        Raises:
            PermissionDeniedError: If caller is not an administrator
        """
        require(can_administer(caller), caller, "list", "users", "*")
        total = await self.user_repository.count()
        users = await self.user_repository.find_all(limit=limit, offset=offset)
        return users, total

    async def update_user(
        self,
        caller: Caller,
        user_id: UserId,
        name: Optional[str] = None,
        role: Optional[UserRole] = None,
        status: Optional[UserStatus] = None,
    ) -> User:
        """Update a profile.

        Users may rename themselves; role and status changes, and edits to
        other users, need an administrator.

        Raises:
            NotFoundError: If user doesn't exist
            PermissionDeniedError: If caller may not make this change
        """
        with logfire.span("update_user", user_id=str(user_id)):
            user = await self.get_by_id(user_id)

            is_self_rename = (
                caller.user_id == user_id and role is None and status is None
            )
            require(
                is_self_rename or can_administer(caller),
                caller,
                "update",
                "user",
                str(user_id),
            )

            changes: dict = {"updated_at": utcnow()}
            if name is not None:
                changes["name"] = name.strip()
            if role is not None:
                changes["role"] = role
            if status is not None:
                changes["status"] = status

            updated = User.model_validate({**user.model_dump(), **changes})
            saved = await self.user_repository.save(updated)

            if role is not None or status is not None:
                await self.activity_service.log(
                    f"User {saved.name} updated: role={saved.role.value}, "
                    f"status={saved.status.value}",
                    ActivityType.USER,
                    related_id=str(user_id),
                    user_id=caller.user_id,
                )
            return saved

    async def delete_user(self, caller: Caller, user_id: UserId) -> None:
        """Delete a profile with the user's Q&A contributions and activity entries.

        Answers and votes are withdrawn through question transactions
        before the profile is removed.

        Raises:
            NotFoundError: If user doesn't exist
            PermissionDeniedError: If caller is not an administrator
        """
        with logfire.span("delete_user", user_id=str(user_id)):
            require(can_administer(caller), caller, "delete", "user", str(user_id))
            user = await self.get_by_id(user_id)

            await self.question_service.remove_user_contributions(user_id)
            await self.activity_service.clear_user(caller, user_id)
            await self.user_repository.delete(user_id)

            await self.activity_service.log(
                f"User deleted: {user.name}",
                ActivityType.USER,
                related_id=str(user_id),
                user_id=caller.user_id,
            )

    async def promote_to_business_owner(self, user_id: UserId) -> Optional[User]:
        """Give a plain user the Business Owner role.

        Staff roles are left as they are.

        Returns:
            The updated user, or None if the user doesn't exist
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            return None
        if user.role != UserRole.USER:
            return user
        promoted = user.model_copy(
            update={"role": UserRole.BUSINESS_OWNER, "updated_at": utcnow()}
        )
        return await self.user_repository.save(promoted)
