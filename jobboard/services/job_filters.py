# jobboard/services/job_filters.py
import logging
from typing import Iterable, List, Tuple

from jobboard.config import SALARY_FILTER_MIN, SALARY_FILTER_MAX
from jobboard.schemas.jobs import JobFilters, JobPosting

log = logging.getLogger("jobs.filters")

SalaryDomain = Tuple[float, float]

DEFAULT_SALARY_DOMAIN: SalaryDomain = (SALARY_FILTER_MIN, SALARY_FILTER_MAX)


def default_filters(salary_domain: SalaryDomain = DEFAULT_SALARY_DOMAIN) -> JobFilters:
    """Filters that let every posting through."""
    return JobFilters(title="", location="", job_type="", salary=salary_domain)


def _contains(haystack, needle: str) -> bool:
    return needle.lower() in (haystack or "").lower()


def matches(
    job: JobPosting,
    filters: JobFilters,
    salary_domain: SalaryDomain = DEFAULT_SALARY_DOMAIN,
) -> bool:
    if filters.title and not _contains(job.title, filters.title):
        return False
    if filters.location and not _contains(job.location, filters.location):
        return False
    if filters.job_type and job.job_type != filters.job_type:
        return False

    # Salary: only an end moved off the domain bound filters anything, and a
    # missing salary figure never excludes a posting.
    lo_bound, hi_bound = salary_domain
    fmin, fmax = filters.salary
    if fmin > lo_bound and job.salary_max is not None and job.salary_max < fmin:
        return False
    if fmax < hi_bound and job.salary_min is not None and job.salary_min > fmax:
        return False
    return True


def filter_jobs(
    jobs: Iterable[JobPosting],
    filters: JobFilters,
    salary_domain: SalaryDomain = DEFAULT_SALARY_DOMAIN,
) -> List[JobPosting]:
    """Keep postings matching every filter. Input order is preserved."""
    jobs = list(jobs)
    out = [j for j in jobs if matches(j, filters, salary_domain)]
    log.debug("filters=%s kept %d/%d", filters.model_dump(), len(out), len(jobs))
    return out
