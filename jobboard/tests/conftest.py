"""
Shared fixtures: an in-memory SQLite database and a TestClient whose
get_db dependency is bound to it.
"""

import os

# Set before anything imports jobboard.config
os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SALARY_FILTER_MIN"] = "0"
os.environ["SALARY_FILTER_MAX"] = "500000"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobboard.database import Base, get_db
from jobboard.models import Job
from jobboard.schemas.jobs import JobPosting


@pytest.fixture
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    from jobboard.main import app

    def _get_test_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_test_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_jobs(db_session):
    """Three rows, inserted in id order 1..3."""
    rows = [
        Job(id=1, title="Backend Engineer", company="Acme", location="Remote",
            jobtype="Full-time", salarymin=600000, salarymax=900000,
            description="APIs", posted="2 days ago", experiance="3-5 yrs"),
        Job(id=2, title="Product Designer", company="Beta", location="Bengaluru",
            jobtype="Contract", salarymin=None, salarymax=None, posted="1 day ago"),
        Job(id=3, title="Data Intern", company="Gamma", location="Pune",
            jobtype="Internship", salarymin=10000, salarymax=20000, posted="today"),
    ]
    db_session.add_all(rows)
    db_session.commit()
    return rows


@pytest.fixture
def postings():
    """Read-model postings in service order (newest first)."""
    return [
        JobPosting(id=4, title="Frontend Developer", company="Delta", location="Remote",
                   job_type="Part-time", salary_min=300000, salary_max=450000),
        JobPosting(id=3, title="Data Intern", company="Gamma", location="Pune",
                   job_type="Internship", salary_min=10000, salary_max=20000),
        JobPosting(id=2, title="Product Designer", company="Beta", location="Bengaluru",
                   job_type="Contract"),
        JobPosting(id=1, title="Backend Engineer", company="Acme", location="Remote",
                   job_type="Full-time", salary_min=600000, salary_max=900000),
    ]
