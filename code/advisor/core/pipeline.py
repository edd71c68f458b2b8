import logging
from typing import Any, Mapping, Union

from finance.allocation import select_allocation
from finance.budget import compute_budget
from finance.recommendations import generate_recommendations

from .models import FinancialInput, ResultSet

logger = logging.getLogger(__name__)


def run_plan(payload: Union[FinancialInput, Mapping[str, Any]]) -> ResultSet:
    """Turn one set of form inputs into the results shown on the page.

    Raw mappings are coerced through ``FinancialInput`` first; the call is
    pure, so identical inputs always give an identical ``ResultSet``.
    """
    if not isinstance(payload, FinancialInput):
        payload = FinancialInput.model_validate(payload)

    expenses = payload.expenses.model_dump()
    budget = compute_budget(payload.income, expenses, payload.current_savings)
    logger.debug(
        "Budget: income=%.2f expenses=%.2f savings=%.2f rate=%.1f%% emergency=%.1f%% of %.2f",
        payload.income,
        budget.total_expenses,
        budget.monthly_savings,
        budget.savings_rate,
        budget.emergency_fund_progress,
        budget.emergency_fund_target,
    )

    allocation = select_allocation(payload.risk_tolerance)
    recommendations = generate_recommendations(
        payload.risk_tolerance,
        payload.investment_horizon,
        budget.monthly_savings,
        payload.current_savings,
        payload.age,
    )
    logger.info(
        "Generated %d recommendations for %s profile: %s",
        len(recommendations),
        payload.risk_tolerance,
        ", ".join(rec.category for rec in recommendations),
    )

    return ResultSet(
        income=payload.income,
        expenses=expenses,
        total_expenses=budget.total_expenses,
        monthly_savings=budget.monthly_savings,
        savings_rate=budget.savings_rate,
        current_savings=payload.current_savings,
        emergency_fund_target=budget.emergency_fund_target,
        emergency_fund_progress=budget.emergency_fund_progress,
        risk_tolerance=payload.risk_tolerance,
        investment_horizon=payload.investment_horizon,
        allocation=allocation,
        recommendations=recommendations,
    )
