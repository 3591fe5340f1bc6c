"""Ranked record models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Tier thresholds (net worth, inclusive lower bounds)
MID_TIER_THRESHOLD = 100_000.0
HIGH_TIER_THRESHOLD = 200_000.0


class WealthTier(str, Enum):
    """Net worth band used to color a record's card."""

    LOW = "low"  # below 100k
    MID = "mid"  # 100k up to 199,999
    HIGH = "high"  # 200k and above

    @classmethod
    def for_net_worth(cls, net_worth: float) -> WealthTier:
        """Classify a net worth value.

        Example:
            >>> WealthTier.for_net_worth(150_000)
            <WealthTier.MID: 'mid'>
        """
        if net_worth >= HIGH_TIER_THRESHOLD:
            return cls.HIGH
        if net_worth >= MID_TIER_THRESHOLD:
            return cls.MID
        return cls.LOW


class RankedRecord(BaseModel):
    """A single ranked record from the source table.

    Attributes:
        name: Display name.
        net_worth: Net worth used for ranking and tiering.
        rank: 1-based rank (1 = highest net worth after ranking).
        company: Company or organisation.
        country: Country or nation.
        extra: Remaining source columns keyed by camelCase header.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    net_worth: float = 0.0
    rank: int = Field(default=0, ge=0)
    company: str = "—"
    country: str = "—"
    extra: dict[str, str] = Field(default_factory=dict)

    @property
    def tier(self) -> WealthTier:
        """Wealth tier of this record."""
        return WealthTier.for_net_worth(self.net_worth)
