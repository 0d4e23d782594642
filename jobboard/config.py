# jobboard/config.py
import os
from pathlib import Path
from dotenv import load_dotenv

# --- Load env from jobboard/.env OR .env (whichever exists) ---
# Works whether you run from repo root or jobboard/
root = Path(__file__).resolve().parents[1]          # project root
package_env = root / "jobboard" / ".env"
root_env = root / ".env"
if package_env.exists():
    load_dotenv(package_env)
elif root_env.exists():
    load_dotenv(root_env)

# === ⚙️ Runtime ===
ENV = os.getenv("ENV", "dev").lower()
AUTO_MIGRATE = os.getenv("AUTO_MIGRATE", "false").strip().lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# === 🌍 CORS Settings ===
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000,http://127.0.0.1:3000"
    ).split(",")
    if origin.strip()
]

# === 🗄️ Database Configuration (robust) ===
def _resolve_sqlite_url(url: str) -> str:
    """Turn 'sqlite:///relative.db' into an absolute path under project root.
    Keep ':memory:' as-is. Ensure absolute paths use 4 slashes."""
    if not url.startswith("sqlite:"):
        return url
    # ':memory:' or driver params
    if ":memory:" in url:
        return url
    # Strip prefix and normalize path
    prefix = "sqlite:///"
    if url.startswith(prefix):
        path = url[len(prefix):]
        # Already absolute? (starts with /) -> "sqlite:///" + "/abs/path" = four slashes
        if Path(path).is_absolute():
            return f"sqlite:////{Path(path).as_posix().lstrip('/')}"
        # Relative paths resolve under the project root, not the cwd
        abs_path = (root / path).resolve()
        return f"sqlite:////{abs_path.as_posix().lstrip('/')}"
    # Other sqlite forms -> return as-is
    return url

# Prefer env DATABASE_URL; if missing, persist to ./data/jobboard.db
_env_db = os.getenv("DATABASE_URL")
if _env_db:
    DATABASE_URL = _resolve_sqlite_url(_env_db)
else:
    data_dir = (root / "data").resolve()
    data_dir.mkdir(parents=True, exist_ok=True)
    sqlite_path = (data_dir / "jobboard.db").resolve()
    DATABASE_URL = f"sqlite:////{sqlite_path.as_posix().lstrip('/')}"

# Optional SQL echo for debugging (SQL_ECHO=true)
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

# === 🌐 Listing client ===
JOBS_API_URL = os.getenv("JOBS_API_URL", "http://localhost:8000/jobs")

# Empty / unset means "no timeout"
_timeout = os.getenv("JOBS_FETCH_TIMEOUT_SECS", "").strip()
JOBS_FETCH_TIMEOUT_SECS = float(_timeout) if _timeout else None

# === 💰 Salary filter domain ===
# A range equal to [SALARY_FILTER_MIN, SALARY_FILTER_MAX] means "no salary filter".
SALARY_FILTER_MIN = float(os.getenv("SALARY_FILTER_MIN", "0"))
SALARY_FILTER_MAX = float(os.getenv("SALARY_FILTER_MAX", "500000"))

if SALARY_FILTER_MIN > SALARY_FILTER_MAX:
    raise ValueError("SALARY_FILTER_MIN must not exceed SALARY_FILTER_MAX")
