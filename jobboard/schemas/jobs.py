from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Tuple, Literal, Union
from pydantic import BaseModel, Field, field_validator

from jobboard.config import SALARY_FILTER_MIN, SALARY_FILTER_MAX
from jobboard.services.normalize import parse_salary

# Same values as constants.JOB_TYPES; "" means "any" (filters) or "unset" (form)
JobTypeChoice = Literal["", "Full-time", "Part-time", "Contract", "Internship"]

PostingOrigin = Literal["server", "local"]


class JobPosting(BaseModel):
    """
    Read model for one row of the `job` table.

    Wire names (jobtype, salarymin, salarymax, experiance) are the column
    names; Python code uses the attribute names.
    """
    id: int
    title: Optional[str] = None                           # stored rows may carry NULL
    company: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[str] = Field(None, alias="jobtype")
    salary_min: Optional[float] = Field(None, alias="salarymin")
    salary_max: Optional[float] = Field(None, alias="salarymax")
    description: Optional[str] = None
    logo: Optional[str] = None
    posted: Optional[Union[str, datetime]] = None        # label ("Just now") or timestamp
    experiance: Optional[str] = None

    # Client-only markers; never part of the wire format
    origin: PostingOrigin = Field("server", exclude=True)
    local_key: Optional[str] = Field(None, exclude=True)   # set for origin="local" only

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
        "extra": "ignore",
    }

    @field_validator("salary_min", "salary_max", mode="before")
    @classmethod
    def _salary_or_none(cls, v):
        # numbers pass through as stored; only text is coerced (bad text -> None)
        if isinstance(v, (int, float, Decimal)) and not isinstance(v, bool):
            return v
        return parse_salary(v)

    @property
    def is_local(self) -> bool:
        return self.origin == "local"


class JobFilters(BaseModel):
    title: str = ""
    location: str = ""
    job_type: JobTypeChoice = ""
    # [min, max]; equal to the configured domain means "no salary filter"
    salary: Tuple[float, float] = (SALARY_FILTER_MIN, SALARY_FILTER_MAX)

    model_config = {"validate_assignment": True}


class JobFormValues(BaseModel):
    """Raw create-form input. Salary fields stay strings until submit."""
    title: str = ""
    company: str = ""
    location: str = ""
    job_type: JobTypeChoice = ""
    salary_min: str = ""
    salary_max: str = ""
    description: str = ""
    application_deadline: Optional[date] = None         # collected, not used

    model_config = {"validate_assignment": True}


class ErrorResponse(BaseModel):
    error: str
