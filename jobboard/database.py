# jobboard/database.py
from sqlalchemy import create_engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from jobboard.config import DATABASE_URL, SQL_ECHO

url = make_url(DATABASE_URL)

engine_kwargs = {"echo": SQL_ECHO, "pool_pre_ping": True}

if url.drivername.startswith("sqlite"):
    # FastAPI runs sync endpoints in a threadpool
    engine_kwargs["connect_args"] = {"check_same_thread": False}
    if url.database in (None, "", ":memory:"):
        # one shared connection, otherwise every session sees an empty db
        engine_kwargs["poolclass"] = StaticPool

engine = create_engine(DATABASE_URL, **engine_kwargs)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def get_db():
    """One session per request; always closed."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
