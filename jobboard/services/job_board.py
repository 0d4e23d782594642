# jobboard/services/job_board.py
"""
Client-side state for the job board page.

JobBoard holds the fetched postings and the active filters and exposes the
filtered view. CreateJobForm drives the "Create Job" dialog; submitting it
prepends a synthetic posting to the board. Nothing created here is sent to
the listing service.
"""
import logging
import uuid
from enum import Enum
from typing import List, Optional

import httpx

from jobboard.config import JOBS_API_URL
from jobboard.constants import JUST_CREATED_LABEL
from jobboard.schemas.jobs import JobFilters, JobFormValues, JobPosting
from jobboard.services.job_filters import (
    DEFAULT_SALARY_DOMAIN, SalaryDomain, default_filters, filter_jobs
)
from jobboard.services.listing_client import FetchResult, fetch_jobs
from jobboard.services.normalize import parse_salary

log = logging.getLogger("jobs.board")


class FormState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"


def build_local_posting(values: JobFormValues, next_id: int) -> JobPosting:
    """Synthetic posting from form input. Raises ValueError on a blank title."""
    title = (values.title or "").strip()
    if not title:
        raise ValueError("title is required")

    return JobPosting(
        id=next_id,
        title=title,
        company=values.company,
        location=values.location,
        job_type=values.job_type or None,
        salary_min=parse_salary(values.salary_min),
        salary_max=parse_salary(values.salary_max),
        description=values.description,
        logo=None,
        posted=JUST_CREATED_LABEL,
        origin="local",
        local_key=uuid.uuid4().hex,
    )


class CreateJobForm:
    """closed -> open() -> open -> submit()/cancel() -> closed (values reset)."""

    def __init__(self):
        self.state = FormState.CLOSED
        self.values = JobFormValues()

    @property
    def is_open(self) -> bool:
        return self.state is FormState.OPEN

    def open(self) -> None:
        self.state = FormState.OPEN

    def set(self, **fields) -> None:
        """Update form fields (validated on assignment)."""
        for name, value in fields.items():
            if name not in JobFormValues.model_fields:
                raise AttributeError(f"unknown form field: {name}")
            setattr(self.values, name, value)

    def _close(self) -> None:
        self.values = JobFormValues()
        self.state = FormState.CLOSED

    def cancel(self) -> None:
        if not self.is_open:
            raise RuntimeError("create form is not open")
        self._close()

    def submit(self, board: "JobBoard") -> JobPosting:
        if not self.is_open:
            raise RuntimeError("create form is not open")
        # a blank title raises before anything changes; the form stays open
        job = board.add_local_job(self.values)
        self._close()
        return job


class JobBoard:
    def __init__(self, salary_domain: SalaryDomain = DEFAULT_SALARY_DOMAIN):
        self.salary_domain = salary_domain
        self.jobs: List[JobPosting] = []
        self.filters: JobFilters = default_filters(salary_domain)
        self.form = CreateJobForm()
        self.last_fetch: Optional[FetchResult] = None
        self._closed = False

    # ---- fetch ----
    async def load(self, client: httpx.AsyncClient, url: str = JOBS_API_URL) -> Optional[FetchResult]:
        """
        Fetch postings once and replace `jobs` with the result.
        Returns None (and leaves state alone) if the board was closed meanwhile.
        """
        result = await fetch_jobs(client=client, url=url)
        if self._closed:
            log.debug("board closed before fetch resolved; dropping %s result", result.status)
            return None
        self.jobs = list(result.jobs)
        self.last_fetch = result
        log.info("loaded %d jobs (status=%s)", len(self.jobs), result.status)
        return result

    def close(self) -> None:
        self._closed = True

    # ---- filters ----
    def set_filters(self, **changes) -> JobFilters:
        self.filters = JobFilters.model_validate({**self.filters.model_dump(), **changes})
        return self.filters

    def reset_filters(self) -> None:
        self.filters = default_filters(self.salary_domain)

    @property
    def visible(self) -> List[JobPosting]:
        return filter_jobs(self.jobs, self.filters, self.salary_domain)

    # ---- local creates ----
    def add_local_job(self, values: JobFormValues) -> JobPosting:
        job = build_local_posting(values, next_id=len(self.jobs) + 1)
        self.jobs = [job] + self.jobs
        log.info("created local job id=%s key=%s title=%r", job.id, job.local_key, job.title)
        return job

    def create_job(self, **fields) -> JobPosting:
        """Open the form, fill it and submit in one go."""
        self.form.open()
        try:
            self.form.set(**fields)
            return self.form.submit(self)
        except Exception:
            self.form.cancel()
            raise

    @property
    def local_jobs(self) -> List[JobPosting]:
        return [j for j in self.jobs if j.is_local]
