from loguru import logger

from app.core.constants import ActivityAction
from app.core.exceptions.domain import AuthorizationError, ResourceNotFoundError
from app.core.permissions import can_comment, can_manage_board, can_view
from app.repos.activity_log import ActivityRepo
from app.repos.comment import CommentRepo
from app.repos.ownership import OwnershipRepo
from app.schemas.comment import CommentCreate, CommentResponse
from app.services.base import BaseService
from app.services.permission_service import PermissionResolver, ensure_capability


class CommentService(BaseService):
    async def add_comment(self, principal_id: int, card_id: int, content: str) -> CommentResponse:
        async with self._session_factory() as session:
            role = await PermissionResolver(OwnershipRepo(session)).resolve_role_by_card(
                principal_id, card_id
            )
            ensure_capability(role, can_comment, "Card", card_id)

            comment = await CommentRepo(session).create_one(
                CommentCreate(card_id=card_id, user_id=principal_id, content=content),
                auto_commit=False,
            )
            ActivityRepo(session).record(
                card_id, principal_id, ActivityAction.COMMENTED, {"comment_id": comment.id}
            )
            await session.commit()
            await session.refresh(comment)
            logger.info(f"Comment added: id={comment.id} card={card_id} by user={principal_id}")
            return CommentResponse.model_validate(comment)

    async def list_comments(self, principal_id: int, card_id: int) -> list[CommentResponse]:
        async with self._session_factory() as session:
            role = await PermissionResolver(OwnershipRepo(session)).resolve_role_by_card(
                principal_id, card_id
            )
            ensure_capability(role, can_view, "Card", card_id)

            comments = await CommentRepo(session).get_card_comments(card_id)
            return [CommentResponse.model_validate(c) for c in comments]

    async def delete_comment(self, principal_id: int, comment_id: int) -> None:
        """Authors may delete their own comments; board managers may delete any."""
        async with self._session_factory() as session:
            repo = CommentRepo(session)
            comment = await repo.get_by_id(comment_id)
            if comment is None:
                raise ResourceNotFoundError("Comment", str(comment_id))

            role = await PermissionResolver(OwnershipRepo(session)).resolve_role_by_card(
                principal_id, comment.card_id
            )
            ensure_capability(role, can_view, "Comment", comment_id)
            if comment.user_id != principal_id and not can_manage_board(role):
                raise AuthorizationError("Only the author or a board owner can delete this comment")

            await repo.delete_by_id(comment_id)
            logger.info(f"Comment deleted: id={comment_id} by user={principal_id}")
