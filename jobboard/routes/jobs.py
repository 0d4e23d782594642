# jobboard/routes/jobs.py
from typing import List
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.schemas.jobs import JobPosting, ErrorResponse

log = logging.getLogger("routes.jobs")

# NOTE: no prefix here; main.py decides where the router is mounted
router = APIRouter()

LIST_JOBS_SQL = text("SELECT * FROM job ORDER BY id DESC")


@router.get(
    "/jobs",
    response_model=List[JobPosting],
    responses={500: {"model": ErrorResponse}},
    tags=["Jobs"],
)
def list_jobs(db: Session = Depends(get_db)):
    """
    Every posting in the `job` table, newest first (descending id).
    No parameters, no filtering, no pagination.
    """
    try:
        rows = db.execute(LIST_JOBS_SQL).mappings().all()
        jobs = [JobPosting.model_validate(dict(row)) for row in rows]
    except Exception:
        # Full traceback goes to the server log; the client gets a generic body
        log.exception("list_jobs failed")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch jobs"})

    log.info("list_jobs returned %d jobs", len(jobs))
    return jobs
