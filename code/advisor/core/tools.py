from typing import Optional

from . import settings

RISK_LABELS = {
    "conservative": "Conservative - Lower risk, steady returns",
    "moderate": "Moderate - Balanced risk and growth",
    "aggressive": "Aggressive - Higher risk, maximum growth",
}
HORIZON_LABELS = {
    "0-2": "Short term (0-2 years)",
    "3-5": "Medium term (3-5 years)",
    "5-10": "Long term (5-10 years)",
    "10+": "Very long term (10+ years)",
}

_RISK_ALIASES = {
    "low": "conservative",
    "safe": "conservative",
    "medium": "moderate",
    "balanced": "moderate",
    "high": "aggressive",
    "growth": "aggressive",
}
_HORIZON_ALIASES = {
    "short": "0-2",
    "short term": "0-2",
    "medium": "3-5",
    "medium term": "3-5",
    "long": "5-10",
    "long term": "5-10",
    "very long": "10+",
    "very long term": "10+",
    "10": "10+",
    "10 +": "10+",
}


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(value, hi))


def normalize_risk_tolerance(value: Optional[str]) -> str:
    """Map a select-box label or alias onto a risk tier.

    Blank input falls back to the configured default. Anything unrecognised
    is returned cleaned so the model layer can reject it.
    """
    if not value:
        return settings.DEFAULT_RISK
    cleaned = value.strip().lower()
    if not cleaned:
        return settings.DEFAULT_RISK
    for key, label in RISK_LABELS.items():
        if cleaned in (key, label.lower()):
            return key
    return _RISK_ALIASES.get(cleaned, cleaned)


def normalize_horizon(value: Optional[str]) -> str:
    if not value:
        return settings.DEFAULT_HORIZON
    cleaned = value.strip().lower()
    if not cleaned:
        return settings.DEFAULT_HORIZON
    for key, label in HORIZON_LABELS.items():
        if cleaned in (key, label.lower()):
            return key
    return _HORIZON_ALIASES.get(cleaned, cleaned)
