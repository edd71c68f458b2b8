from dataclasses import dataclass, asdict
from typing import Dict, Literal

RiskTolerance = Literal["conservative", "moderate", "aggressive"]
InvestmentHorizon = Literal["0-2", "3-5", "5-10", "10+"]
Priority = Literal["High", "Medium", "Low"]

EXPENSE_CATEGORIES = ("housing", "utilities", "food", "transportation", "entertainment", "other")


@dataclass
class ExpenseBreakdown:
    housing: float = 0.0
    utilities: float = 0.0
    food: float = 0.0
    transportation: float = 0.0
    entertainment: float = 0.0
    other: float = 0.0

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class DerivedBudget:
    total_expenses: float
    monthly_savings: float
    savings_rate: float
    emergency_fund_target: float
    emergency_fund_progress: float


@dataclass(frozen=True)
class AllocationTarget:
    stocks: int
    bonds: int
    real_estate: int
    cash: int

    @property
    def total(self) -> int:
        return self.stocks + self.bonds + self.real_estate + self.cash


@dataclass(frozen=True)
class Recommendation:
    category: str
    priority: Priority
    action: str
    allocation: float
    details: str
