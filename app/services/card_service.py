from datetime import datetime, timezone

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.constants import ActivityAction
from app.core.exceptions.domain import ResourceNotFoundError
from app.core.permissions import can_edit_cards, can_view
from app.models.card import Card
from app.repos.activity_log import ActivityRepo
from app.repos.card import CardRepo
from app.repos.ownership import OwnershipRepo
from app.schemas.card import CardCreate, CardMove, CardResponse, CardUpdate
from app.services.base import BaseService
from app.services.ordering import allocate_position, apply_reindex
from app.services.permission_service import PermissionResolver, ensure_capability
from app.utils.position import position_between


class CardService(BaseService):
    async def _editable_card(self, session: AsyncSession, principal_id: int, card_id: int) -> Card:
        role = await PermissionResolver(OwnershipRepo(session)).resolve_role_by_card(
            principal_id, card_id
        )
        ensure_capability(role, can_edit_cards, "Card", card_id)

        card = await CardRepo(session).get_by_id(card_id)
        if card is None:
            raise ResourceNotFoundError("Card", str(card_id))
        return card

    async def get_cards(self, principal_id: int, list_id: int) -> list[CardResponse]:
        """Non-archived cards of a list in display order."""
        async with self._session_factory() as session:
            role = await PermissionResolver(OwnershipRepo(session)).resolve_role_by_list(
                principal_id, list_id
            )
            ensure_capability(role, can_view, "List", list_id)

            cards = await CardRepo(session).get_list_cards(list_id)
            return [CardResponse.model_validate(card) for card in cards]

    async def get_card(self, principal_id: int, card_id: int) -> CardResponse:
        async with self._session_factory() as session:
            role = await PermissionResolver(OwnershipRepo(session)).resolve_role_by_card(
                principal_id, card_id
            )
            ensure_capability(role, can_view, "Card", card_id)

            card = await CardRepo(session).get_by_id(card_id)
            if card is None:
                raise ResourceNotFoundError("Card", str(card_id))
            return CardResponse.model_validate(card)

    async def create_card(
        self, principal_id: int, list_id: int, title: str, description: str | None = None
    ) -> CardResponse:
        """Append a new card after the last card of a list."""
        async with self._session_factory() as session:
            role = await PermissionResolver(OwnershipRepo(session)).resolve_role_by_list(
                principal_id, list_id
            )
            ensure_capability(role, can_edit_cards, "List", list_id)

            repo = CardRepo(session)
            last = await repo.get_last(list_id)
            card = await repo.create_one(
                CardCreate(
                    list_id=list_id,
                    title=title,
                    description=description,
                    position=position_between(last, None),
                )
            )
            logger.info(f"Card created: id={card.id} list={list_id}")
            return CardResponse.model_validate(card)

    async def update_card(self, principal_id: int, card_id: int, data: CardUpdate) -> CardResponse:
        async with self._session_factory() as session:
            await self._editable_card(session, principal_id, card_id)
            card = await CardRepo(session).update_by_id(
                card_id, data, exclude_none=False, exclude_unset=True
            )
            return CardResponse.model_validate(card)

    async def delete_card(self, principal_id: int, card_id: int) -> bool:
        async with self._session_factory() as session:
            await self._editable_card(session, principal_id, card_id)
            deleted = await CardRepo(session).delete_by_id(card_id)
            if deleted:
                logger.info(f"Card deleted: id={card_id} by user={principal_id}")
            return deleted

    async def place_card(
        self,
        principal_id: int,
        card_id: int,
        list_id: int,
        *,
        before_id: int | None = None,
        after_id: int | None = None,
        auto_reindex: bool = True,
    ) -> CardResponse:
        """Drop a card between two cards of ``list_id`` (possibly another list).

        Only the moved card is written unless the neighbors have run out of room.
        """
        async with self._session_factory() as session:
            resolver = PermissionResolver(OwnershipRepo(session))
            card = await self._editable_card(session, principal_id, card_id)

            target_role = await resolver.resolve_role_by_list(principal_id, list_id)
            ensure_capability(target_role, can_edit_cards, "List", list_id)

            siblings = [
                c for c in await CardRepo(session).get_list_cards(list_id) if c.id != card_id
            ]
            source_list_id = card.list_id
            card.position = allocate_position(
                siblings,
                before_id=before_id,
                after_id=after_id,
                min_gap=self.settings.position_min_gap,
                auto_reindex=auto_reindex,
            )
            card.list_id = list_id
            ActivityRepo(session).record(
                card_id,
                principal_id,
                ActivityAction.MOVED,
                {"from_list": source_list_id, "to_list": list_id},
            )
            await session.commit()
            await session.refresh(card)
            return CardResponse.model_validate(card)

    async def move_card(self, principal_id: int, card_id: int, move: CardMove) -> CardResponse:
        """Move a card so it ends up at rank ``move.position`` of ``move.list_id``.

        Ranks count the visible cards of the target list, the moved card excluded,
        so rank 0 is the head and any rank past the end appends. The card takes a
        position between its new neighbors and the siblings keep theirs.
        """
        async with self._session_factory() as session:
            resolver = PermissionResolver(OwnershipRepo(session))
            card = await self._editable_card(session, principal_id, card_id)

            target_role = await resolver.resolve_role_by_list(principal_id, move.list_id)
            ensure_capability(target_role, can_edit_cards, "List", move.list_id)

            siblings = [
                c for c in await CardRepo(session).get_list_cards(move.list_id) if c.id != card_id
            ]
            rank = min(move.position, len(siblings))
            source_list_id = card.list_id

            card.position = allocate_position(
                siblings,
                before_id=siblings[rank - 1].id if rank > 0 else None,
                after_id=siblings[rank].id if rank < len(siblings) else None,
                min_gap=self.settings.position_min_gap,
            )
            card.list_id = move.list_id
            ActivityRepo(session).record(
                card_id,
                principal_id,
                ActivityAction.MOVED,
                {"from_list": source_list_id, "to_list": move.list_id, "rank": rank},
            )
            await session.commit()
            await session.refresh(card)

            logger.info(
                f"Card moved: id={card_id} list {source_list_id}->{move.list_id} rank={rank}"
            )
            return CardResponse.model_validate(card)

    async def archive_card(self, principal_id: int, card_id: int) -> CardResponse:
        """Soft-delete a card. It keeps its list and position for a later restore."""
        async with self._session_factory() as session:
            card = await self._editable_card(session, principal_id, card_id)
            card.is_archived = True
            card.archived_at = datetime.now(timezone.utc)
            ActivityRepo(session).record(card_id, principal_id, ActivityAction.ARCHIVED)
            await session.commit()
            await session.refresh(card)
            logger.info(f"Card archived: id={card_id} by user={principal_id}")
            return CardResponse.model_validate(card)

    async def restore_card(self, principal_id: int, card_id: int) -> CardResponse:
        """Bring an archived card back at the end of its list."""
        async with self._session_factory() as session:
            card = await self._editable_card(session, principal_id, card_id)
            if card.is_archived:
                last = await CardRepo(session).get_last(card.list_id)
                card.position = position_between(last, None)
                card.is_archived = False
                card.archived_at = None
                ActivityRepo(session).record(card_id, principal_id, ActivityAction.RESTORED)
                await session.commit()
                await session.refresh(card)
                logger.info(f"Card restored: id={card_id} by user={principal_id}")
            return CardResponse.model_validate(card)

    async def list_archived(self, principal_id: int, board_id: int) -> list[CardResponse]:
        async with self._session_factory() as session:
            role = await PermissionResolver(OwnershipRepo(session)).resolve_role(
                principal_id, board_id
            )
            ensure_capability(role, can_view, "Board", board_id)

            cards = await CardRepo(session).get_archived_for_board(board_id)
            return [CardResponse.model_validate(card) for card in cards]

    async def reindex_cards(self, principal_id: int, list_id: int) -> list[CardResponse]:
        """Respace the non-archived cards of a list to 1000, 2000, ... in display order."""
        async with self._session_factory() as session:
            role = await PermissionResolver(OwnershipRepo(session)).resolve_role_by_list(
                principal_id, list_id
            )
            ensure_capability(role, can_edit_cards, "List", list_id)

            cards = await CardRepo(session).get_list_cards(list_id)
            apply_reindex(cards)
            await session.commit()
            for card in cards:
                await session.refresh(card)

            logger.info(f"Reindexed {len(cards)} cards in list={list_id}")
            return [CardResponse.model_validate(card) for card in cards]
