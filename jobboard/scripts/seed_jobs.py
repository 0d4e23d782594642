# jobboard/scripts/seed_jobs.py
import os, json
import logging
from sqlalchemy.orm import Session
from jobboard.database import Base, SessionLocal, engine
from jobboard.models import Job
from jobboard.services.normalize import norm_job_type, parse_salary

log = logging.getLogger("scripts.seed_jobs")

JSONL_PATH = os.environ.get("JOBS_JSONL", "data/jobs.jsonl")

def row_to_job(obj: dict) -> Job:
    """Map one JSONL object (column names or camelCase keys) to a Job row."""
    def pick(*keys):
        for k in keys:
            if obj.get(k) not in (None, ""):
                return obj[k]
        return None

    return Job(
        title=pick("title") or "Untitled",
        company=pick("company"),
        location=pick("location"),
        jobtype=norm_job_type(pick("jobtype", "jobType", "job_type")),
        salarymin=parse_salary(pick("salarymin", "salaryMin", "salary_min")),
        salarymax=parse_salary(pick("salarymax", "salaryMax", "salary_max")),
        description=pick("description"),
        logo=pick("logo"),
        posted=pick("posted"),
        experiance=pick("experiance", "experience"),
    )

def run(path: str = JSONL_PATH) -> int:
    if not os.path.exists(path):
        print(f"No file found at {path}. Nothing to import.")
        return 0

    Base.metadata.create_all(bind=engine)
    db: Session = SessionLocal()
    added = skipped = 0
    try:
        with open(path, "r", encoding="utf-8") as f:
            for lineno, line in enumerate(f, 1):
                line = line.strip()
                if not line:
                    continue
                try:
                    obj = json.loads(line)
                except json.JSONDecodeError as e:
                    log.warning("line %d: invalid JSON (%s); skipped", lineno, e)
                    skipped += 1
                    continue
                if not isinstance(obj, dict):
                    skipped += 1
                    continue
                db.add(row_to_job(obj))
                added += 1
        db.commit()
    finally:
        db.close()
    print(f"✅ Imported {added} jobs from {path} ({skipped} skipped).")
    return added

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run()
