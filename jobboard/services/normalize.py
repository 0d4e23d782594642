import math
import re
from decimal import Decimal
from typing import Optional

from jobboard.constants import JOB_TYPES

ET_MAP = {
    "full time": "Full-time",
    "full-time": "Full-time",
    "fulltime": "Full-time",
    "part time": "Part-time",
    "part-time": "Part-time",
    "parttime": "Part-time",
    "contract": "Contract",
    "contractor": "Contract",
    "intern": "Internship",
    "internship": "Internship",
}

def norm_job_type(raw: Optional[str]) -> Optional[str]:
    """Normalize a free-text employment type to one of JOB_TYPES (or None)."""
    if not raw:
        return None
    if raw in JOB_TYPES:
        return raw
    s = raw.strip().lower()
    s = re.split(r"[·|,/]", s)[0].strip()  # first token
    for k, v in ET_MAP.items():
        if k in s:
            return v
    return None

def parse_salary(raw) -> Optional[float]:
    """
    Coerce a salary value to a non-negative float.
    Numbers pass through; strings like "500000" or "5,00,000" are parsed.
    Blank, non-numeric, negative or non-finite input -> None (absent).
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float, Decimal)):
        n = float(raw)
    else:
        s = str(raw).strip().replace(",", "")
        if not s:
            return None
        try:
            n = float(s)
        except ValueError:
            return None
    if math.isnan(n) or math.isinf(n) or n < 0:
        return None
    return n
