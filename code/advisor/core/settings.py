import os

from finance.utils import to_int

LOG_LEVEL = os.getenv("ADVISOR_LOG_LEVEL", "INFO").upper()
LOG_JSON = os.getenv("ADVISOR_LOG_JSON", "").lower() in {"1", "true", "yes"}

DEFAULT_AGE = to_int(os.getenv("ADVISOR_DEFAULT_AGE"), 30) or 30
DEFAULT_RISK = os.getenv("ADVISOR_DEFAULT_RISK", "moderate").strip().lower()
DEFAULT_HORIZON = os.getenv("ADVISOR_DEFAULT_HORIZON", "5-10").strip()

if DEFAULT_RISK not in {"conservative", "moderate", "aggressive"}:
    DEFAULT_RISK = "moderate"
if DEFAULT_HORIZON not in {"0-2", "3-5", "5-10", "10+"}:
    DEFAULT_HORIZON = "5-10"
