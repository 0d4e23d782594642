# jobboard/services/display.py
from typing import Dict

from jobboard.constants import (
    DEFAULT_EXPERIENCE_LABEL, DEFAULT_JOB_TYPE_LABEL, DEFAULT_SALARY_LABEL, LAKH
)
from jobboard.schemas.jobs import JobPosting


def salary_label(job: JobPosting) -> str:
    """salary_max in LPA, e.g. 900000 -> "9 LPA", 1250000 -> "12.5 LPA"."""
    if not job.salary_max:
        return DEFAULT_SALARY_LABEL
    return f"{job.salary_max / LAKH:g} LPA"


def card_badges(job: JobPosting) -> Dict[str, str]:
    return {
        "experience": job.experiance or DEFAULT_EXPERIENCE_LABEL,
        "job_type": job.job_type or DEFAULT_JOB_TYPE_LABEL,
        "salary": salary_label(job),
    }
