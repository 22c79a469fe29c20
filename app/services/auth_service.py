from loguru import logger

from app.core.constants import UserRole, UserStatus
from app.core.exceptions.domain import (
    AuthenticationError,
    AuthorizationError,
    DuplicateResourceError,
    ResourceNotFoundError,
)
from app.core.logger import mask_email
from app.core.security import (
    generate_session_token,
    hash_password,
    session_expires_at,
    verify_password,
)
from app.repos.session import SessionRepo
from app.repos.user import UserRepo
from app.schemas.session import SessionCreate
from app.schemas.user import UserCreate, UserRegister, UserResponse
from app.services.base import BaseService


class AuthService(BaseService):
    """Handles registration, approval, login, and cookie session tokens."""

    async def register(self, data: UserRegister) -> UserResponse:
        """Register a new user. Auto-approves admin if email matches ADMIN_EMAIL."""
        async with self._session_factory() as session:
            user_repo = UserRepo(session)

            existing = await user_repo.get_by_email(data.email)
            if existing:
                raise DuplicateResourceError("User", data.email)

            is_admin = data.email.lower() == self.settings.admin_email.lower()
            role = UserRole.ADMIN if is_admin else UserRole.USER
            status = UserStatus.APPROVED if is_admin else UserStatus.PENDING

            create_data = UserCreate(
                email=data.email.lower(),
                name=data.name,
                password_hash=hash_password(data.password.get_secret_value()),
                role=role,
                status=status,
            )
            user = await user_repo.create_one(create_data)

            logger.info(f"User registered: {mask_email(user.email)} (role={role}, status={status})")
            return UserResponse.model_validate(user)

    async def login(self, email: str, password: str) -> tuple[UserResponse, str]:
        """Login a user. Returns (user_response, session_token).

        Raises:
            AuthenticationError: If credentials are invalid.
            AuthorizationError: If user account is not approved.
        """
        async with self._session_factory() as session:
            user_repo = UserRepo(session)
            session_repo = SessionRepo(session)

            user = await user_repo.get_by_email(email.lower())
            if not user:
                raise AuthenticationError("Invalid email or password")

            if not verify_password(password, user.password_hash):
                raise AuthenticationError("Invalid email or password")

            if user.status == UserStatus.PENDING:
                raise AuthorizationError("Your account is pending admin approval")
            if user.status == UserStatus.REJECTED:
                raise AuthorizationError("Your account has been rejected")

            token = generate_session_token()
            session_data = SessionCreate(
                token=token,
                user_id=user.id,
                expires_at=session_expires_at(self.settings.session_expiry_hours),
            )
            await session_repo.create_one(session_data)

            logger.info(f"User logged in: {mask_email(user.email)}")
            return UserResponse.model_validate(user), token

    async def restore_session(self, token: str) -> UserResponse | None:
        """Resolve a cookie token to its user. Returns None if expired, invalid or unapproved."""
        async with self._session_factory() as session:
            db_session = await SessionRepo(session).get_valid_by_token(token)
            if not db_session:
                return None

            user = await UserRepo(session).get_by_id(db_session.user_id)
            if not user or not user.is_approved:
                return None

            return UserResponse.model_validate(user)

    async def logout(self, token: str) -> None:
        """Delete a session (logout)."""
        async with self._session_factory() as session:
            await SessionRepo(session).delete_by_token(token)
            logger.info("User logged out")

    async def get_pending_users(self) -> list[UserResponse]:
        """Get all pending users (admin function)."""
        async with self._session_factory() as session:
            users = await UserRepo(session).get_pending_users()
            return [UserResponse.model_validate(u) for u in users]

    async def approve_user(self, user_id: int) -> UserResponse:
        """Approve a pending user (admin function)."""
        async with self._session_factory() as session:
            user = await UserRepo(session).approve_user(user_id)
            if not user:
                raise ResourceNotFoundError("User", str(user_id))
            logger.info(f"User approved: {mask_email(user.email)}")
            return UserResponse.model_validate(user)

    async def reject_user(self, user_id: int) -> UserResponse:
        """Reject a user and end their active sessions (admin function)."""
        async with self._session_factory() as session:
            user = await UserRepo(session).reject_user(user_id)
            if not user:
                raise ResourceNotFoundError("User", str(user_id))
            await SessionRepo(session).delete_user_sessions(user_id)
            logger.info(f"User rejected: {mask_email(user.email)}")
            return UserResponse.model_validate(user)

    async def delete_user(self, user_id: int) -> bool:
        """Delete a user and, through cascades, everything in their workspaces (admin function)."""
        async with self._session_factory() as session:
            deleted = await UserRepo(session).delete_by_id(user_id)
            if deleted:
                logger.info(f"User deleted: id={user_id}")
            return deleted

    async def cleanup_sessions(self) -> int:
        """Delete expired sessions. Returns count deleted."""
        async with self._session_factory() as session:
            count = await SessionRepo(session).cleanup_expired()
            if count:
                logger.info(f"Cleaned up {count} expired sessions")
            return count
