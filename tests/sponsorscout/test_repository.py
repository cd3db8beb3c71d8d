"""Tests for the data repository."""

from datetime import datetime, timezone

import pytest

from sponsorscout.schemas.company import Company, Tier, TierData
from sponsorscout.schemas.job import Job, JobsData, Platform
from sponsorscout.services.repository import DataRepository
from sponsorscout.services.storage import JOBS_KEY, LocalFileStore, tier_key

NOW = datetime(2025, 1, 20, tzinfo=timezone.utc)


@pytest.fixture
def repository(tmp_path):
    """Repository over a temporary local store."""
    return DataRepository(LocalFileStore(str(tmp_path)))


def _job(job_id: str) -> Job:
    return Job(
        id=job_id,
        company_id="ACME",
        company_name="Acme",
        title="Software Engineer",
        url=f"https://example.com/{job_id}",
        scraped_at="2025-01-20T00:00:00.000Z",
        platform=Platform.LEVER,
    )


def _tier(tier: Tier, *companies: Company) -> TierData:
    return TierData(
        generated_at="2025-01-01T00:00:00.000Z",
        count=len(companies),
        tier=tier.value,
        companies=list(companies),
    )


def _company(company_id: str, tier: Tier = Tier.TOP, **extra) -> Company:
    return Company(id=company_id, name=company_id.title(), tier=tier, **extra)


class TestJobs:
    """Tests for job batch operations."""

    def test_get_jobs_empty(self, repository):
        """Test reading before anything was stored."""
        assert repository.get_jobs() is None

    def test_set_jobs_stores_camel_case(self, repository):
        """Test that the stored document uses camelCase keys."""
        repository.set_jobs(JobsData(last_scraped="t", total_jobs=1, jobs=[_job("a")]))
        raw = repository.store.get(JOBS_KEY)
        assert raw["lastScraped"] == "t"
        assert raw["totalJobs"] == 1
        assert raw["jobs"][0]["companyId"] == "ACME"
        assert repository.get_jobs().jobs[0].id == "a"

    def test_add_jobs_merges(self, repository):
        """Test merging into the stored batch."""
        repository.add_jobs([_job("a"), _job("b")], now=NOW)
        merged = repository.add_jobs([_job("b"), _job("c")], now=NOW)
        assert [j.id for j in merged.jobs] == ["a", "b", "c"]
        assert repository.get_jobs().total_jobs == 3

    def test_add_jobs_replaces_summary_when_given(self, repository):
        """Test that a new summary replaces the stored one."""
        repository.add_jobs([_job("a")], now=NOW, summary={"totalJobs": 1})
        repository.add_jobs([_job("b")], now=NOW)
        assert repository.get_jobs().summary == {"totalJobs": 1}
        repository.add_jobs([], now=NOW, summary={"totalJobs": 0})
        assert repository.get_jobs().summary == {"totalJobs": 0}

    def test_delete_job(self, repository):
        """Test removing one job."""
        repository.add_jobs([_job("a"), _job("b")], now=NOW)
        assert repository.delete_job("a") is True
        data = repository.get_jobs()
        assert [j.id for j in data.jobs] == ["b"]
        assert data.total_jobs == 1

    def test_delete_unknown_job(self, repository):
        """Test removing a job that is not stored."""
        assert repository.delete_job("a") is False
        repository.add_jobs([_job("a")], now=NOW)
        assert repository.delete_job("zzz") is False


class TestTiers:
    """Tests for tier roster operations."""

    def test_get_tier_missing(self, repository):
        """Test reading an unseeded tier."""
        assert repository.get_tier(Tier.TOP) is None

    def test_get_all_tiers(self, repository):
        """Test that all four roster tiers are returned."""
        repository.set_tier(Tier.MIDDLE, _tier(Tier.MIDDLE, _company("ACME", Tier.MIDDLE)))
        tiers = repository.get_all_tiers()
        assert list(tiers) == [Tier.TOP, Tier.MIDDLE, Tier.LOWER, Tier.LOWEST]
        assert tiers[Tier.TOP] is None
        assert tiers[Tier.MIDDLE].companies[0].id == "ACME"

    def test_get_company_from_tiers(self, repository):
        """Test finding a company across tiers."""
        repository.set_tier(Tier.LOWER, _tier(Tier.LOWER, _company("ACME", Tier.LOWER)))
        company, tier = repository.get_company_from_tiers("ACME")
        assert company.id == "ACME"
        assert tier == Tier.LOWER
        assert repository.get_company_from_tiers("NOPE") is None

    def test_unknown_fields_survive_round_trip(self, repository):
        """Test that extra keys in stored companies are preserved."""
        raw = _tier(Tier.TOP, _company("ACME")).to_document()
        raw["companies"][0]["notes"] = "keep me"
        repository.store.set(tier_key("top"), raw)

        repository.set_career_urls("ACME", ["https://acme.test/careers"])
        stored = repository.store.get(tier_key("top"))
        assert stored["companies"][0]["notes"] == "keep me"
        assert stored["companies"][0]["careerUrls"] == ["https://acme.test/careers"]


class TestCareerUrls:
    """Tests for career URL edits."""

    @pytest.fixture(autouse=True)
    def seeded(self, repository):
        repository.set_tier(Tier.TOP, _tier(Tier.TOP, _company("ACME"), _company("GLOBEX")))

    def test_add_career_url(self, repository):
        """Test adding URLs without duplicates."""
        assert repository.add_career_url("ACME", "https://acme.test/jobs") == ["https://acme.test/jobs"]
        assert repository.add_career_url("ACME", "https://acme.test/jobs") == ["https://acme.test/jobs"]
        assert repository.get_career_urls("ACME") == ["https://acme.test/jobs"]
        assert repository.get_career_urls("GLOBEX") == []

    def test_remove_career_url(self, repository):
        """Test removing a URL."""
        repository.set_career_urls("ACME", ["https://a.test", "https://b.test"])
        assert repository.remove_career_url("ACME", "https://a.test") == ["https://b.test"]

    def test_set_career_urls_drops_blanks(self, repository):
        """Test that blank URLs are dropped."""
        assert repository.set_career_urls("ACME", [" https://a.test ", "", "  "]) == ["https://a.test"]

    def test_unknown_company(self, repository):
        """Test that edits to unknown companies return None."""
        assert repository.get_career_urls("NOPE") is None
        assert repository.add_career_url("NOPE", "https://x.test") is None
        assert repository.remove_career_url("NOPE", "https://x.test") is None
        assert repository.set_career_urls("NOPE", []) is None


class TestAdmin:
    """Tests for bulk admin operations."""

    def test_seed_and_stats(self, repository):
        """Test seeding tiers and jobs, then reading stats."""
        errors = repository.seed_all(
            tiers={
                Tier.TOP: _tier(Tier.TOP, _company("A"), _company("B")),
                Tier.LOWEST: _tier(Tier.LOWEST, _company("C", Tier.LOWEST)),
            },
            jobs=JobsData(last_scraped="t", total_jobs=1, jobs=[_job("a")]),
        )
        assert errors == []

        stats = repository.get_data_stats()
        assert stats["hasJobs"] is True
        assert stats["jobsCount"] == 1
        assert stats["hasTiers"] == {"top": True, "middle": False, "lower": False, "lowest": True}
        assert stats["tierCounts"] == {"top": 2, "middle": 0, "lower": 0, "lowest": 1}
        assert stats["totalCompanies"] == 3

    def test_clear_all(self, repository):
        """Test that clearing removes jobs and rosters."""
        repository.seed_all(
            tiers={Tier.TOP: _tier(Tier.TOP, _company("A"))},
            jobs=JobsData(last_scraped="t", total_jobs=0),
        )
        assert repository.clear_all() is True
        assert repository.get_jobs() is None
        assert repository.get_tier(Tier.TOP) is None

    def test_cleanup_unused_keys(self, repository):
        """Test that legacy keys are deleted and current ones kept."""
        repository.store.set("company-links:ACME", ["https://acme.test"])
        repository.store.set("data:companies", [])
        repository.add_jobs([_job("a")], now=NOW)

        deleted = repository.cleanup_unused_keys()

        assert sorted(deleted) == ["company-links:ACME", "data:companies"]
        assert repository.get_jobs() is not None
        assert repository.cleanup_unused_keys() == []
