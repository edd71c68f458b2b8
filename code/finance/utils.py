import logging
import math

logger = logging.getLogger(__name__)


def safe_div(a, b, default=0.0):
    try:
        result = a / b
    except (TypeError, ZeroDivisionError):
        return default
    if math.isnan(result):
        return default
    return result


def to_float(value, default: float = 0.0) -> float:
    # Form fields arrive as strings; blanks and garbage count as zero.
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.debug("Could not coerce %r to a number, using %s", value, default)
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def to_int(value, default: int = 0) -> int:
    return int(to_float(value, float(default)))
