from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from finance.schemas import AllocationTarget, InvestmentHorizon, Recommendation, RiskTolerance
from finance.utils import to_float, to_int

from . import settings
from .tools import normalize_horizon, normalize_risk_tolerance


class Expenses(BaseModel):
    housing: float = 0.0
    utilities: float = 0.0
    food: float = 0.0
    transportation: float = 0.0
    entertainment: float = 0.0
    other: float = 0.0

    @field_validator("*", mode="before")
    @classmethod
    def coerce_amount(cls, value: Any) -> float:
        return to_float(value)


class FinancialInput(BaseModel):
    income: float = 0.0
    expenses: Expenses = Field(default_factory=Expenses)
    current_savings: float = 0.0
    age: int = Field(default_factory=lambda: settings.DEFAULT_AGE)
    risk_tolerance: RiskTolerance = Field(default_factory=lambda: settings.DEFAULT_RISK)
    investment_horizon: InvestmentHorizon = Field(default_factory=lambda: settings.DEFAULT_HORIZON)

    @field_validator("income", "current_savings", mode="before")
    @classmethod
    def coerce_amount(cls, value: Any) -> float:
        return to_float(value)

    @field_validator("expenses", mode="before")
    @classmethod
    def coerce_expenses(cls, value: Any) -> Any:
        return value if value is not None else {}

    @field_validator("age", mode="before")
    @classmethod
    def coerce_age(cls, value: Any) -> int:
        return to_int(value) or settings.DEFAULT_AGE

    @field_validator("risk_tolerance", mode="before")
    @classmethod
    def coerce_risk(cls, value: Any) -> str:
        return normalize_risk_tolerance(value if isinstance(value, str) else None)

    @field_validator("investment_horizon", mode="before")
    @classmethod
    def coerce_horizon(cls, value: Any) -> str:
        if value is not None and not isinstance(value, str):
            value = str(value)
        return normalize_horizon(value)


class ResultSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    income: float
    expenses: Dict[str, float]
    total_expenses: float
    monthly_savings: float
    savings_rate: float
    current_savings: float
    emergency_fund_target: float
    emergency_fund_progress: float
    risk_tolerance: RiskTolerance
    investment_horizon: InvestmentHorizon
    allocation: AllocationTarget
    recommendations: Tuple[Recommendation, ...]
