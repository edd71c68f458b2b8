from typing import Mapping, Union

from .schemas import EXPENSE_CATEGORIES, DerivedBudget, ExpenseBreakdown
from .utils import safe_div

EMERGENCY_FUND_MONTHS = 5


def total_expenses(expenses: Union[ExpenseBreakdown, Mapping[str, float]]) -> float:
    if isinstance(expenses, ExpenseBreakdown):
        expenses = expenses.as_dict()
    return float(sum(expenses.get(name, 0.0) for name in EXPENSE_CATEGORIES))


def savings_rate(income: float, monthly_savings: float) -> float:
    if income <= 0:
        return 0.0
    return monthly_savings / income * 100.0


def emergency_fund_progress(current_savings: float, target: float) -> float:
    """Percent of the emergency fund already saved.

    Unbounded above. A zero target (no expenses) counts as fully funded when
    there is any savings at all, and as 0% otherwise.
    """
    if target == 0:
        return 100.0 if current_savings > 0 else 0.0
    return safe_div(current_savings, target) * 100.0


def compute_budget(
    income: float,
    expenses: Union[ExpenseBreakdown, Mapping[str, float]],
    current_savings: float,
) -> DerivedBudget:
    total = total_expenses(expenses)
    monthly_savings = income - total
    target = total * EMERGENCY_FUND_MONTHS
    return DerivedBudget(
        total_expenses=total,
        monthly_savings=monthly_savings,
        savings_rate=savings_rate(income, monthly_savings),
        emergency_fund_target=target,
        emergency_fund_progress=emergency_fund_progress(current_savings, target),
    )
