"""Tests for ranking records by net worth."""

from __future__ import annotations

from constellate.core.records import RankedRecord, parse_records, rank_by_net_worth, ranks_of


class TestRankByNetWorth:
    """Tests for rank_by_net_worth."""

    def test_descending_with_stable_ties(self, sample_csv_text: str) -> None:
        """Test richest first; equal net worth keeps input order."""
        ranked = rank_by_net_worth(parse_records(sample_csv_text))
        assert [r.name for r in ranked] == ["Bob Tanaka", "Dev Patel", "Alice Moreau", "Carla Diaz"]
        assert ranks_of(ranked) == [1, 2, 3, 4]

    def test_inputs_unchanged(self) -> None:
        """Test ranking returns new records."""
        records = [RankedRecord(name="a", net_worth=1.0, rank=7)]
        ranked = rank_by_net_worth(records)
        assert records[0].rank == 7
        assert ranked[0].rank == 1

    def test_empty(self) -> None:
        """Test no records ranks to nothing."""
        assert rank_by_net_worth([]) == []


class TestRanksOf:
    """Tests for ranks_of."""

    def test_input_order(self) -> None:
        """Test ranks are reported in input order."""
        records = [RankedRecord(name="x", rank=3), RankedRecord(name="y", rank=1)]
        assert ranks_of(records) == [3, 1]
