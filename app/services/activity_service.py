from app.core.permissions import can_view
from app.repos.activity_log import ActivityRepo
from app.repos.ownership import OwnershipRepo
from app.schemas.activity_log import ActivityLogResponse
from app.services.base import BaseService
from app.services.permission_service import PermissionResolver, ensure_capability


class ActivityService(BaseService):
    async def get_card_activity(
        self, principal_id: int, card_id: int, *, limit: int = 50
    ) -> list[ActivityLogResponse]:
        """Latest activity on a card, newest first. Anyone who can view the card may read it."""
        async with self._session_factory() as session:
            role = await PermissionResolver(OwnershipRepo(session)).resolve_role_by_card(
                principal_id, card_id
            )
            ensure_capability(role, can_view, "Card", card_id)

            entries = await ActivityRepo(session).get_card_activity(card_id, limit=limit)
            return [ActivityLogResponse.model_validate(entry) for entry in entries]
