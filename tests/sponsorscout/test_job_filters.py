"""Tests for keyword filtering, recency filtering and batch merging."""

from datetime import datetime, timezone

from sponsorscout.schemas.job import Job, JobsData, Platform
from sponsorscout.services.job_filters import (
    DEFAULT_EXCLUDED_KEYWORDS,
    DEFAULT_TARGET_ROLES,
    filter_jobs,
    filter_recent,
    merge_job_batches,
    parse_keyword_list,
)

NOW = datetime(2025, 1, 20, 12, 0, tzinfo=timezone.utc)


def _job(job_id: str = "gh-acme-1", title: str = "Software Engineer", posted_at: str | None = None) -> Job:
    return Job(
        id=job_id,
        company_id="ACME",
        company_name="Acme",
        title=title,
        url=f"https://example.com/{job_id}",
        posted_at=posted_at,
        scraped_at="2025-01-20T00:00:00.000Z",
        platform=Platform.GREENHOUSE,
    )


class TestKeywordList:
    """Tests for parsing keyword settings."""

    def test_parse_keyword_list(self):
        """Test splitting, trimming and lower-casing."""
        assert parse_keyword_list(" Engineer, SRE ,,", ()) == ["engineer", "sre"]

    def test_parse_keyword_list_defaults(self):
        """Test that unset or blank values fall back to the defaults."""
        assert parse_keyword_list(None, ("Engineer",)) == ["engineer"]
        assert parse_keyword_list("   ", DEFAULT_TARGET_ROLES) == list(DEFAULT_TARGET_ROLES)


class TestFilterJobs:
    """Tests for the title keyword filter."""

    def test_executive_title_excluded(self):
        """Test that an excluded keyword wins over a matching role."""
        jobs = [_job(title="Senior Director of Sales")]
        assert filter_jobs(jobs, ["engineer"], ["director"]) == []

    def test_engineering_director_excluded(self):
        """Test exclusion when both a role and an excluded keyword match."""
        jobs = [_job(title="Director, Software Engineering")]
        assert filter_jobs(jobs, ["engineer"], ["director"]) == []

    def test_matching_title_kept(self):
        """Test that a target role match is kept."""
        jobs = [_job(title="Senior Backend Engineer")]
        assert filter_jobs(jobs, ["engineer"], ["director"]) == jobs

    def test_no_role_match_dropped(self):
        """Test that titles without a target role are dropped."""
        assert filter_jobs([_job(title="Account Executive")], ["engineer"], []) == []

    def test_case_insensitive(self):
        """Test that matching ignores case on both sides."""
        jobs = [_job(title="SOFTWARE ENGINEER")]
        assert filter_jobs(jobs, ["Software Engineer"], ["VP"]) == jobs

    def test_order_preserved(self):
        """Test that kept jobs keep their input order."""
        jobs = [
            _job("a", "Data Engineer"),
            _job("b", "Recruiter"),
            _job("c", "DevOps Engineer"),
        ]
        kept = filter_jobs(jobs, ["engineer"], ["recruiter"])
        assert [j.id for j in kept] == ["a", "c"]

    def test_every_kept_title_is_sound(self):
        """Test that output titles contain a role and no excluded keyword."""
        titles = [
            "Software Engineer",
            "VP of Engineering",
            "Head of Platform",
            "Cloud Architect",
            "Marketing Manager",
            "SRE II",
            "Chief Technology Officer",
        ]
        jobs = [_job(str(i), t) for i, t in enumerate(titles)]
        kept = filter_jobs(jobs, list(DEFAULT_TARGET_ROLES), list(DEFAULT_EXCLUDED_KEYWORDS))
        for job in kept:
            title = job.title.lower()
            assert any(r in title for r in DEFAULT_TARGET_ROLES)
            assert not any(k in title for k in DEFAULT_EXCLUDED_KEYWORDS)
        assert {j.title for j in kept} == {"Software Engineer", "Cloud Architect", "SRE II"}

    def test_empty_target_roles_keep_nothing(self):
        """Test that no target roles means nothing matches."""
        assert filter_jobs([_job()], [], []) == []


class TestFilterRecent:
    """Tests for the recency filter."""

    def test_recent_job_kept(self):
        """Test that a posting inside the window is kept."""
        jobs = [_job(posted_at="2025-01-15T00:00:00.000Z")]
        assert filter_recent(jobs, 10, now=NOW) == jobs

    def test_old_job_dropped(self):
        """Test that a posting older than the window is dropped."""
        jobs = [_job(posted_at="2024-12-01T00:00:00.000Z")]
        assert filter_recent(jobs, 10, now=NOW) == []

    def test_boundary_kept(self):
        """Test that a posting exactly at the cutoff is kept."""
        jobs = [_job(posted_at="2025-01-10T12:00:00.000Z")]
        assert filter_recent(jobs, 10, now=NOW) == jobs

    def test_unknown_date_kept(self):
        """Test that missing and unparseable dates are kept."""
        jobs = [_job("a", posted_at=None), _job("b", posted_at="sometime last week")]
        assert filter_recent(jobs, 10, now=NOW) == jobs

    def test_offset_dates_compared_in_utc(self):
        """Test that offset timestamps are compared correctly."""
        jobs = [_job(posted_at="2025-01-10T08:00:00-05:00")]
        assert filter_recent(jobs, 10, now=NOW) == jobs

    def test_naive_now_treated_as_utc(self):
        """Test that a naive reference time is accepted."""
        jobs = [_job(posted_at="2025-01-15T00:00:00Z")]
        assert filter_recent(jobs, 10, now=NOW.replace(tzinfo=None)) == jobs


class TestMergeJobBatches:
    """Tests for merging job batches."""

    def test_merge_into_empty(self):
        """Test merging when nothing is stored."""
        merged = merge_job_batches([_job("a")], None, now=NOW)
        assert merged.total_jobs == 1
        assert merged.last_scraped == "2025-01-20T12:00:00.000Z"
        assert merged.summary is None

    def test_merge_unions_by_id(self):
        """Test that new jobs replace stored jobs with the same id."""
        existing = JobsData(
            last_scraped="2025-01-01T00:00:00.000Z",
            total_jobs=2,
            jobs=[_job("a", "Old Title"), _job("b")],
            summary={"totalJobs": 2},
        )
        merged = merge_job_batches([_job("a", "New Title"), _job("c")], existing, now=NOW)

        assert [j.id for j in merged.jobs] == ["a", "b", "c"]
        assert merged.jobs[0].title == "New Title"
        assert merged.total_jobs == 3
        assert merged.summary == {"totalJobs": 2}

    def test_merge_is_idempotent(self):
        """Test that merging the same jobs twice changes nothing."""
        new_jobs = [_job("a"), _job("b")]
        once = merge_job_batches(new_jobs, None, now=NOW)
        twice = merge_job_batches(new_jobs, once, now=NOW)
        assert twice == once
