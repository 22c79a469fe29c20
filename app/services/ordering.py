from collections.abc import Sequence

from loguru import logger

from app.core.exceptions.domain import PrecisionExhaustedError, ValidationError
from app.models.base import PositionedMixin
from app.utils.position import has_room, neighbors, position_between, reindex


def apply_reindex(items: Sequence[PositionedMixin]) -> None:
    """Write evenly spaced positions onto ORM rows in their current order."""
    for item, position in reindex(items):
        item.position = position


def allocate_position(
    siblings: Sequence[PositionedMixin],
    *,
    before_id: int | None,
    after_id: int | None,
    min_gap: float,
    auto_reindex: bool = True,
) -> float:
    """Position for an item dropped between two of ``siblings`` (already in display order).

    When the neighbors are too close, the siblings are reindexed in place and the
    position recomputed, unless ``auto_reindex`` is False.
    """
    try:
        before, after = neighbors(siblings, before_id=before_id, after_id=after_id)
    except KeyError as e:
        raise ValidationError(f"Neighbor {e.args[0]} is not a sibling of the moved item") from e

    if before is not None and after is not None:
        if siblings.index(before) >= siblings.index(after):
            raise ValidationError("'before' must be ordered ahead of 'after'")

    if not has_room(before, after, min_gap):
        if not auto_reindex:
            raise PrecisionExhaustedError(
                before.position if before is not None else 0.0,
                after.position,  # type: ignore[union-attr]
            )
        logger.info(f"Reindexing {len(siblings)} siblings, no room between neighbors")
        apply_reindex(siblings)

    return position_between(before, after)
