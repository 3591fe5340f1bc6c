"""Per-record ordering of layout targets.

Strategies emit targets in slot order (slot 0 is the top-left table cell,
the bottom of the helix, and so on). Callers that hold records in an
arbitrary order use these helpers to hand the best-ranked record the
first slot.
"""

from __future__ import annotations

from collections.abc import Sequence

from constellate.core.layouts.errors import InvalidOrderingError
from constellate.core.layouts.models import LayoutTarget


def slots_by_rank(ranks: Sequence[float]) -> list[int]:
    """Assign a slot index to every record from its rank.

    Lower ranks get lower slots; ties keep input order.

    Args:
        ranks: Rank of record i at position i.

    Returns:
        slots where slots[i] is the slot given to record i.

    Example:
        >>> slots_by_rank([3, 1, 2])
        [2, 0, 1]
    """
    order = sorted(range(len(ranks)), key=lambda i: ranks[i])
    slots = [0] * len(ranks)
    for slot, record in enumerate(order):
        slots[record] = slot
    return slots


def order_targets(targets: Sequence[LayoutTarget], ranks: Sequence[float]) -> list[LayoutTarget]:
    """Reorder targets so record i receives the slot its rank earns.

    Args:
        targets: Targets in slot order, one per record.
        ranks: Rank of each record, in the caller's record order.

    Returns:
        Targets in record order.

    Raises:
        InvalidOrderingError: If ranks and targets differ in length.
    """
    if len(ranks) != len(targets):
        raise InvalidOrderingError(expected=len(targets), actual=len(ranks))
    return [targets[slot] for slot in slots_by_rank(ranks)]
