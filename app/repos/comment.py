from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.comment import Comment
from app.repos.base import BaseRepository
from app.schemas.comment import CommentCreate


class CommentRepo(BaseRepository[Comment, CommentCreate, CommentCreate]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, Comment)

    async def get_card_comments(self, card_id: int) -> list[Comment]:
        """Get comments on a card, oldest first."""
        stmt = (
            select(Comment)
            .where(Comment.card_id == card_id)
            .order_by(Comment.created_at, Comment.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
