import os
from dotenv import load_dotenv

from .constants import CACHE_TTL_SECONDS

# Load .env from repo root (dotenv auto-walks up from CWD)
load_dotenv()


def _get_positive_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None:
        return default
    try:
        parsed = int(str(val).strip())
    except ValueError:
        return default
    return parsed if parsed > 0 else default


# --- FotMob tunables ---
FOTMOB_TIMEOUT_MS = _get_positive_int("FOTMOB_TIMEOUT_MS", 4000)   # per-call timeout
FOTMOB_CACHE_TTL_SECONDS = _get_positive_int("FOTMOB_CACHE_TTL_SECONDS", CACHE_TTL_SECONDS)
