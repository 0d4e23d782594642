# jobboard/schemas/__init__.py
from jobboard.schemas.jobs import (
    JobPosting,
    JobFilters,
    JobFormValues,
    ErrorResponse,
)

__all__ = ["JobPosting", "JobFilters", "JobFormValues", "ErrorResponse"]
