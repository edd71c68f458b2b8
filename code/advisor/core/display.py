from typing import Dict, List

from finance.schemas import EXPENSE_CATEGORIES, AllocationTarget

from .models import ResultSet
from .tools import clamp

EXPENSE_COLORS = {
    "housing": "#3b82f6",
    "utilities": "#8b5cf6",
    "food": "#ec4899",
    "transportation": "#f59e0b",
    "entertainment": "#10b981",
    "other": "#6366f1",
}
ALLOCATION_COLORS = {
    "Stocks": "#3b82f6",
    "Bonds": "#10b981",
    "Real Estate": "#f59e0b",
    "Cash": "#6366f1",
}
PRIORITY_COLORS = {
    "High": "#991b1b",
    "Medium": "#854d0e",
    "Low": "#166534",
}
RISK_COLORS = {
    "conservative": "#166534",
    "moderate": "#1e40af",
    "aggressive": "#9a3412",
}
DEFAULT_COLOR = "#1f2937"

INVESTMENT_PRINCIPLES = (
    "Start early and invest consistently - even small amounts compound significantly over time",
    "Diversify across different asset classes to manage risk",
    "Keep fees low - choose low-cost index funds and ETFs when possible",
    "Don't try to time the market - stay invested for the long term",
    "Rebalance your portfolio annually to maintain your target allocation",
)


def format_currency(value: float) -> str:
    if value < 0:
        return f"-${abs(value):,.2f}"
    return f"${value:,.2f}"


def format_percent(value: float) -> str:
    return f"{value:.1f}%"


def priority_color(priority: str) -> str:
    return PRIORITY_COLORS.get(priority, DEFAULT_COLOR)


def risk_color(risk: str) -> str:
    return RISK_COLORS.get(risk, DEFAULT_COLOR)


def risk_label(risk: str) -> str:
    return f"{risk[:1].upper()}{risk[1:]} Portfolio"


def progress_fraction(progress: float) -> float:
    return clamp(progress, 0.0, 100.0) / 100.0


def expense_chart_rows(result: ResultSet) -> List[Dict[str, object]]:
    rows = []
    for name in EXPENSE_CATEGORIES:
        value = result.expenses.get(name, 0.0)
        if value > 0:
            rows.append({"name": name.capitalize(), "value": value, "color": EXPENSE_COLORS[name]})
    return rows


def allocation_chart_rows(allocation: AllocationTarget) -> List[Dict[str, object]]:
    values = {
        "Stocks": allocation.stocks,
        "Bonds": allocation.bonds,
        "Real Estate": allocation.real_estate,
        "Cash": allocation.cash,
    }
    return [{"name": name, "value": value, "color": ALLOCATION_COLORS[name]} for name, value in values.items()]


def build_plan_summary(result: ResultSet) -> str:
    lines: List[str] = [
        "Summary:",
        f"- Monthly income: {format_currency(result.income)}",
        f"- Total expenses: {format_currency(result.total_expenses)}",
        f"- Monthly savings: {format_currency(result.monthly_savings)} ({format_percent(result.savings_rate)} savings rate)",
        (
            f"- Emergency fund: {format_percent(result.emergency_fund_progress)} of "
            f"{format_currency(result.emergency_fund_target)} (5 months of expenses)"
        ),
        (
            f"- {risk_label(result.risk_tolerance)}: {result.allocation.stocks}% stocks, "
            f"{result.allocation.bonds}% bonds, {result.allocation.real_estate}% real estate, "
            f"{result.allocation.cash}% cash"
        ),
        "",
        "Recommendations:",
    ]
    for rec in result.recommendations:
        line = f"- [{rec.priority}] {rec.category}: {rec.action}"
        if rec.allocation > 0:
            line += f" ({format_currency(rec.allocation)}/mo)"
        lines.append(line)

    lines.extend(["", "Principles:"])
    lines.extend(f"- {p}" for p in INVESTMENT_PRINCIPLES)
    return "\n".join(lines)
