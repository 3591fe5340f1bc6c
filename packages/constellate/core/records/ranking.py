"""Rank records by net worth."""

from __future__ import annotations

from collections.abc import Sequence

from constellate.core.records.models import RankedRecord


def rank_by_net_worth(records: Sequence[RankedRecord]) -> list[RankedRecord]:
    """Sort records by net worth (highest first) and renumber ranks from 1.

    The sort is stable, so records with equal net worth keep their input
    order.

    Args:
        records: Records in any order.

    Returns:
        New records in ranked order with rank = position + 1.
    """
    ordered = sorted(records, key=lambda record: record.net_worth, reverse=True)
    return [record.model_copy(update={"rank": i + 1}) for i, record in enumerate(ordered)]


def ranks_of(records: Sequence[RankedRecord]) -> list[int]:
    """Rank of each record, in input order (for LayoutSelector ranks)."""
    return [record.rank for record in records]
