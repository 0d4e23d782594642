# jobboard/services/listing_client.py
import logging
from dataclasses import dataclass, field
from typing import List, Literal, Optional

import httpx
from pydantic import ValidationError

from jobboard.config import JOBS_API_URL, JOBS_FETCH_TIMEOUT_SECS
from jobboard.schemas.jobs import JobPosting

log = logging.getLogger("jobs.client")

FetchStatus = Literal["ok", "malformed", "error"]


@dataclass
class FetchResult:
    """
    Outcome of one GET /jobs.

    status:
      ok        -> body was a list of postings; `jobs` holds them in order
      malformed -> body was JSON but not a list of postings; `jobs` is empty
      error     -> transport failure or non-JSON body; `jobs` is empty
    """
    status: FetchStatus
    jobs: List[JobPosting] = field(default_factory=list)
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


def parse_jobs_payload(data) -> FetchResult:
    """Turn a decoded JSON body into a FetchResult."""
    if not isinstance(data, list):
        log.warning("GET /jobs: expected a list, got %s", type(data).__name__)
        return FetchResult("malformed", reason=f"expected a list, got {type(data).__name__}")
    try:
        jobs = [JobPosting.model_validate(row) for row in data]
    except ValidationError as e:
        log.warning("GET /jobs: bad posting in response: %s", e)
        return FetchResult("malformed", reason="response contains an invalid posting")
    return FetchResult("ok", jobs=jobs)


async def fetch_jobs(
    *,
    client: httpx.AsyncClient,
    url: str = JOBS_API_URL,
) -> FetchResult:
    """Single GET against the listing service. No retry."""
    try:
        log.debug("GET %s", url)
        r = await client.get(url, headers={"Accept": "application/json"})
    except httpx.HTTPError as e:
        log.error("Error fetching jobs: %s", e)
        return FetchResult("error", reason=str(e) or type(e).__name__)

    if r.status_code >= 400:
        log.error("GET %s returned %s: %s", url, r.status_code, r.text[:200])
        return FetchResult("error", reason=f"HTTP {r.status_code}")

    try:
        data = r.json()
    except ValueError as e:
        log.error("Error decoding jobs response: %s", e)
        return FetchResult("error", reason="response is not JSON")
    return parse_jobs_payload(data)


def make_client(timeout: Optional[float] = JOBS_FETCH_TIMEOUT_SECS) -> httpx.AsyncClient:
    """AsyncClient for the listing service (timeout=None disables the timeout)."""
    return httpx.AsyncClient(timeout=timeout)
