"""Ranked record tables: parsing, ranking and tiering."""

from constellate.core.records.models import RankedRecord, WealthTier
from constellate.core.records.parsing import (
    RecordParseError,
    load_records,
    parse_numeric,
    parse_records,
    to_camel_case,
)
from constellate.core.records.ranking import rank_by_net_worth, ranks_of

__all__ = [
    "RankedRecord",
    "RecordParseError",
    "WealthTier",
    "load_records",
    "parse_numeric",
    "parse_records",
    "rank_by_net_worth",
    "ranks_of",
    "to_camel_case",
]
