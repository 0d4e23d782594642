# jobboard/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from jobboard import __version__
from jobboard.config import ENV, AUTO_MIGRATE, LOG_LEVEL, ALLOWED_ORIGINS

# -----------
# Logging
# -----------
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger("jobboard")

# ----------------------------------------
# DB metadata (DEV ONLY: auto-create tables)
# ----------------------------------------
from jobboard.database import Base, engine  # noqa: E402
from jobboard import models  # noqa: F401,E402

if ENV == "dev" or AUTO_MIGRATE:
    Base.metadata.create_all(bind=engine)

# -----------
# Routers
# -----------
from jobboard.routes import jobs  # noqa: E402

app = FastAPI(
    title="Job Board API",
    version=__version__,
    description="Read-only listing of job postings",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=False,                # no auth, no cookies
    allow_methods=["GET"],
    allow_headers=["*"],
    max_age=600,
)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    log.info("REQ %s %s -> %s", request.method, request.url.path, response.status_code)
    return response

app.include_router(jobs.router)

# -----------
# Health & root
# -----------
@app.get("/health")
def health():
    return {"status": "ok", "env": ENV}

@app.get("/")
def root():
    return {"name": "Job Board API", "version": __version__}

@app.on_event("startup")
async def list_routes():
    for r in app.routes:
        if isinstance(r, APIRoute):
            methods = ",".join(sorted(r.methods))
            log.debug("%-10s %-20s -> %s.%s", methods, r.path, r.endpoint.__module__, r.endpoint.__name__)
