# jobboard/models.py
from __future__ import annotations

from sqlalchemy import Column, Integer, String, Text, Numeric

from jobboard.database import Base


# =======================
# Job model
# =======================
class Job(Base):
    # Table and column names are shared with other consumers of this schema;
    # keep them as-is (including "experiance").
    __tablename__ = "job"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    title = Column(String(255), nullable=False)
    company = Column(String(255), nullable=True)
    location = Column(String(255), nullable=True)
    jobtype = Column(String(50), nullable=True)              # Full-time | Part-time | Contract | Internship

    # Annual figures; min <= max is expected but not enforced
    salarymin = Column(Numeric(12, 2), nullable=True)
    salarymax = Column(Numeric(12, 2), nullable=True)

    description = Column(Text, nullable=True)
    logo = Column(String(500), nullable=True)
    posted = Column(String(100), nullable=True)              # timestamp or label ("2 days ago")
    experiance = Column(String(100), nullable=True)          # free text, e.g. "1-2 yrs"

    def __repr__(self) -> str:
        return f"<Job id={self.id} title={self.title!r}>"
