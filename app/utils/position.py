"""Fractional positions for ordered siblings (lists on a board, cards in a list).

Inserting between two neighbors takes their midpoint, so only the moved item
is written. Repeated bisection eventually runs out of float precision; use
:func:`has_room` to detect that and :func:`reindex` to respace the siblings.
"""

from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar

from app.core.constants import POSITION_STEP


class Positioned(Protocol):
    position: float


T = TypeVar("T", bound=Positioned)


def position_between(before: Positioned | None, after: Positioned | None) -> float:
    """Return a position that sorts after ``before`` and ahead of ``after``.

    Either neighbor may be None: both None is an empty collection, only
    ``after`` is the head, only ``before`` is the tail.
    """
    if before is None and after is None:
        return POSITION_STEP
    if before is None:
        return after.position / 2
    if after is None:
        return before.position + POSITION_STEP
    return (before.position + after.position) / 2


def has_room(before: Positioned | None, after: Positioned | None, min_gap: float = 0.0) -> bool:
    """True if :func:`position_between` would land strictly between the neighbors.

    ``min_gap`` additionally requires the new position to sit more than
    ``min_gap`` away from each neighbor.
    """
    if after is None:
        return True
    low = 0.0 if before is None else before.position
    candidate = position_between(before, after)
    return low < candidate < after.position and min(
        candidate - low, after.position - candidate
    ) > min_gap


def reindex(items: Iterable[T]) -> list[tuple[T, float]]:
    """Pair each item with an evenly spaced position, keeping the input order.

    Positions are ``1000, 2000, 3000, ...``. The items are not modified.
    """
    return [(item, (index + 1) * POSITION_STEP) for index, item in enumerate(items)]


def neighbors(
    siblings: Sequence[T],
    *,
    before_id: int | None,
    after_id: int | None,
) -> tuple[T | None, T | None]:
    """Find the ``before``/``after`` entities by id among already-ordered siblings.

    Raises ``KeyError`` for an id that is not among the siblings.
    """
    by_id = {sibling.id: sibling for sibling in siblings}  # type: ignore[attr-defined]
    before = by_id[before_id] if before_id is not None else None
    after = by_id[after_id] if after_id is not None else None
    return before, after
