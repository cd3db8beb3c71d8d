"""Tests for combining and deduplicating tier rosters."""

from sponsorscout.schemas.company import Company, Tier
from sponsorscout.services.company_dedupe import dedupe_companies, tier_counts


def _company(company_id: str, name: str, score: float, tier: Tier = Tier.LOWER, **extra) -> Company:
    return Company(id=company_id, name=name, priority_score=score, tier=tier, **extra)


class TestDedupeCompanies:
    """Tests for deduplication."""

    def test_same_name_higher_score_wins(self):
        """Test that the higher-scored record survives a name collision."""
        companies = [_company("X", "Acme Inc", 80), _company("Y", "acme inc ", 95)]
        result = dedupe_companies(companies)
        assert len(result) == 1
        assert result[0].priority_score == 95

    def test_winner_replaces_whole_record(self):
        """Test that the surviving record is the winner's, not a blend."""
        companies = [
            _company("X", "Acme Inc", 80, tier=Tier.LOWER, poc_email="a@acme.test"),
            _company("Y", "ACME INC", 95, tier=Tier.MIDDLE),
        ]
        (winner,) = dedupe_companies(companies)
        assert winner.id == "Y"
        assert winner.tier == Tier.MIDDLE
        assert winner.poc_email is None

    def test_same_id_deduplicated(self):
        """Test that the id pass runs before the name pass."""
        companies = [_company("ACME", "Acme", 50), _company("ACME", "Acme Corporation", 60)]
        result = dedupe_companies(companies)
        assert [(c.id, c.name) for c in result] == [("ACME", "Acme Corporation")]

    def test_tie_keeps_first(self):
        """Test that equal scores keep the first record seen."""
        result = dedupe_companies([_company("A", "Acme", 70), _company("B", "acme", 70)])
        assert [c.id for c in result] == ["A"]

    def test_sorted_by_priority(self):
        """Test that output is ordered by score, highest first."""
        companies = [_company("A", "A", 10), _company("B", "B", 30), _company("C", "C", 20)]
        assert [c.id for c in dedupe_companies(companies)] == ["B", "C", "A"]

    def test_idempotent(self):
        """Test that running twice gives the same result."""
        companies = [
            _company("A", "Acme", 10),
            _company("B", "acme", 40),
            _company("C", "Globex", 25),
            _company("C", "Globex LLC", 5),
            _company("D", " GLOBEX ", 30),
        ]
        once = dedupe_companies(companies)
        assert dedupe_companies(once) == once
        assert len({c.id for c in once}) == len(once)
        assert len({c.name.strip().lower() for c in once}) == len(once)

    def test_empty(self):
        """Test deduplicating nothing."""
        assert dedupe_companies([]) == []


class TestTierCounts:
    """Tests for per-tier counts."""

    def test_counts_include_empty_tiers(self):
        """Test that every tier appears in the counts."""
        counts = tier_counts([_company("A", "A", 1, tier=Tier.TOP), _company("B", "B", 1, tier=Tier.TOP)])
        assert counts == {"top": 2, "middle": 0, "lower": 0, "lowest": 0, "below50": 0}
