"""
Tests for client-side filter evaluation.
"""

import pytest
from pydantic import ValidationError

from jobboard.schemas.jobs import JobFilters, JobPosting
from jobboard.services.job_filters import default_filters, filter_jobs, matches


@pytest.fixture
def engineer():
    return JobPosting(
        id=1, title="Backend Engineer", location="Remote", job_type="Full-time",
        salary_min=600000, salary_max=900000,
    )


def _filters(**kw):
    return default_filters().model_copy(update=kw)


class TestNoOpFilter:
    def test_default_filters_keep_everything(self, postings):
        assert filter_jobs(postings, default_filters()) == postings

    def test_default_filters_values(self):
        f = default_filters()
        assert (f.title, f.location, f.job_type) == ("", "", "")
        assert f.salary == (0, 500000)

    def test_empty_input(self):
        assert filter_jobs([], default_filters()) == []


class TestTextFilters:
    def test_title_case_insensitive_substring(self, engineer):
        assert matches(engineer, _filters(title="engineer"))
        assert matches(engineer, _filters(title="END ENG"))

    def test_title_mismatch(self, engineer):
        assert not matches(engineer, _filters(title="designer"))

    def test_location_substring(self, engineer):
        assert matches(engineer, _filters(location="rem"))
        assert not matches(engineer, _filters(location="pune"))

    def test_missing_title_only_passes_empty_title_filter(self):
        job = JobPosting(id=8, title=None)
        assert matches(job, default_filters())
        assert not matches(job, _filters(title="engineer"))

    def test_missing_location_fails_location_filter(self):
        job = JobPosting(id=9, title="Anywhere")
        assert matches(job, default_filters())
        assert not matches(job, _filters(location="remote"))


class TestJobTypeFilter:
    def test_exact_match(self, engineer):
        assert matches(engineer, _filters(job_type="Full-time"))
        assert not matches(engineer, _filters(job_type="Contract"))

    def test_unset_job_type_only_passes_any(self):
        job = JobPosting(id=9, title="Generalist")
        assert matches(job, _filters(job_type=""))
        assert not matches(job, _filters(job_type="Full-time"))

    def test_unknown_job_type_rejected(self):
        with pytest.raises(ValidationError):
            JobFilters(job_type="Freelance")


class TestSalaryFilter:
    def test_min_above_posting_max_excludes(self, engineer):
        assert not matches(engineer, _filters(salary=(950000, 500000)))

    def test_max_below_posting_min_excludes(self, engineer):
        assert not matches(engineer, _filters(salary=(0, 400000)))

    def test_inverted_range_at_domain_max_keeps_posting(self, engineer):
        # fmin=700000 <= salary_max; fmax == domain max so the upper rule is off
        assert matches(engineer, _filters(salary=(700000, 500000)))

    def test_overlapping_range_keeps_posting(self):
        job = JobPosting(id=2, title="Analyst", salary_min=200000, salary_max=300000)
        assert matches(job, _filters(salary=(250000, 280000)))

    @pytest.mark.parametrize("salary", [(0, 0), (400000, 450000), (500000, 500000), (1, 1)])
    def test_missing_salary_never_excluded(self, salary):
        job = JobPosting(id=3, title="Mystery")
        assert matches(job, _filters(salary=salary))

    def test_only_min_present(self):
        job = JobPosting(id=4, title="Min only", salary_min=100000)
        assert not matches(job, _filters(salary=(0, 50000)))
        assert matches(job, _filters(salary=(900000, 500000)))

    def test_custom_domain(self):
        job = JobPosting(id=5, title="Hourly", salary_min=20, salary_max=40)
        domain = (10.0, 100.0)
        assert matches(job, default_filters(domain), domain)
        assert not matches(job, _filters(salary=(50, 100)), domain)
        # 10 is the domain floor, so it is not a lower bound here
        assert matches(job, _filters(salary=(10, 100)), domain)


class TestFilterJobs:
    def test_preserves_input_order(self, postings):
        out = filter_jobs(postings, _filters(location="remote"))
        assert [j.id for j in out] == [4, 1]

    def test_idempotent(self, postings):
        f = _filters(title="e", salary=(100000, 500000))
        once = filter_jobs(postings, f)
        assert filter_jobs(once, f) == once

    def test_all_filters_combined(self, postings):
        f = _filters(title="engineer", location="remote", job_type="Full-time", salary=(500000, 500000))
        assert [j.id for j in filter_jobs(postings, f)] == [1]

    def test_does_not_mutate_input(self, postings):
        before = list(postings)
        filter_jobs(postings, _filters(title="nothing matches this"))
        assert postings == before
