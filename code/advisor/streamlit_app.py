# streamlit_app.py
import os
import sys

import plotly.graph_objects as go
import streamlit as st

# Make `advisor` and `finance` importable when launched with `streamlit run`.
CODE_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if CODE_ROOT not in sys.path:
    sys.path.insert(0, CODE_ROOT)

from advisor.core.display import (  # noqa: E402
    INVESTMENT_PRINCIPLES,
    allocation_chart_rows,
    expense_chart_rows,
    format_currency,
    format_percent,
    priority_color,
    progress_fraction,
    risk_color,
    risk_label,
)
from advisor.core.logging_config import configure_logging  # noqa: E402
from advisor.core.models import FinancialInput  # noqa: E402
from advisor.core.pipeline import run_plan  # noqa: E402
from advisor.core.tools import HORIZON_LABELS, RISK_LABELS  # noqa: E402
from finance.schemas import EXPENSE_CATEGORIES  # noqa: E402

EXPENSE_PLACEHOLDERS = {
    "housing": "1200",
    "utilities": "150",
    "food": "400",
    "transportation": "300",
    "entertainment": "200",
    "other": "150",
}

configure_logging()

st.set_page_config(page_title="Smart Finance & Investment Advisor", layout="wide")
st.title("Smart Finance & Investment Advisor")
st.caption("Get personalized investment recommendations based on your financial situation and goals")


def badge(text: str, color: str) -> str:
    return (
        f"<span style='background:{color}1a;color:{color};padding:0.2rem 0.75rem;"
        f"border-radius:999px;font-size:0.8rem;font-weight:600;'>{text}</span>"
    )


def render_form() -> dict:
    left, right = st.columns(2)
    with left:
        st.subheader("Income & Savings")
        income = st.text_input("Monthly Income ($)", placeholder="5000")
        savings = st.text_input("Current Savings ($)", placeholder="10000")
        age = st.text_input("Age", placeholder="30")
    with right:
        st.subheader("Monthly Expenses")
        grid = st.columns(2)
        expenses = {}
        for i, name in enumerate(EXPENSE_CATEGORIES):
            with grid[i % 2]:
                expenses[name] = st.text_input(name.capitalize(), placeholder=EXPENSE_PLACEHOLDERS[name])

    risk_col, horizon_col = st.columns(2)
    risks = list(RISK_LABELS)
    horizons = list(HORIZON_LABELS)
    with risk_col:
        risk = st.selectbox(
            "Risk Tolerance", risks, index=risks.index("moderate"), format_func=RISK_LABELS.get
        )
    with horizon_col:
        horizon = st.selectbox(
            "Investment Timeline", horizons, index=horizons.index("5-10"), format_func=HORIZON_LABELS.get
        )

    return {
        "income": income,
        "expenses": expenses,
        "current_savings": savings,
        "age": age,
        "risk_tolerance": risk,
        "investment_horizon": horizon,
    }


def render_overview(result) -> None:
    st.header("Financial Overview")
    cols = st.columns(4)
    cols[0].metric("Monthly Income", format_currency(result.income))
    cols[1].metric("Total Expenses", format_currency(result.total_expenses))
    cols[2].metric("Monthly Savings", format_currency(result.monthly_savings))
    cols[3].metric("Savings Rate", format_percent(result.savings_rate))

    st.subheader("Emergency Fund Status")
    st.caption(f"Target: {format_currency(result.emergency_fund_target)} (5 months of expenses)")
    st.progress(progress_fraction(result.emergency_fund_progress))
    st.write(f"{format_percent(result.emergency_fund_progress)} Complete")


def render_charts(result) -> None:
    left, right = st.columns(2)
    with left:
        st.subheader("Expense Breakdown")
        rows = expense_chart_rows(result)
        if rows:
            fig = go.Figure(
                go.Pie(
                    labels=[r["name"] for r in rows],
                    values=[r["value"] for r in rows],
                    marker={"colors": [r["color"] for r in rows]},
                    textinfo="label+percent",
                )
            )
            fig.update_layout(showlegend=False, height=300, margin={"t": 10, "b": 10})
            st.plotly_chart(fig, width="stretch")
        else:
            st.info("No expenses entered.")
    with right:
        st.subheader("Recommended Asset Allocation")
        rows = allocation_chart_rows(result.allocation)
        fig = go.Figure(
            go.Bar(
                x=[r["name"] for r in rows],
                y=[r["value"] for r in rows],
                marker={"color": [r["color"] for r in rows]},
            )
        )
        fig.update_layout(yaxis_title="Allocation (%)", height=300, margin={"t": 10, "b": 10})
        st.plotly_chart(fig, width="stretch")
        st.markdown(
            badge(risk_label(result.risk_tolerance), risk_color(result.risk_tolerance)),
            unsafe_allow_html=True,
        )


def render_recommendations(result) -> None:
    st.header("Personalized Investment Recommendations")
    for rec in result.recommendations:
        with st.container(border=True):
            title, priority = st.columns([4, 1])
            title.markdown(f"**{rec.category}**  \n{rec.action}")
            priority.markdown(badge(f"{rec.priority} Priority", priority_color(rec.priority)), unsafe_allow_html=True)
            if rec.allocation > 0:
                st.info(f"Suggested Monthly Investment: {format_currency(rec.allocation)}")
            st.caption(rec.details)

    st.subheader("Key Investment Principles")
    st.markdown("\n".join(f"- {p}" for p in INVESTMENT_PRINCIPLES))


form_values = render_form()
if st.button("Generate Investment Plan", type="primary", width="stretch"):
    st.session_state.result = run_plan(FinancialInput.model_validate(form_values))

result = st.session_state.get("result")
if result is not None:
    render_overview(result)
    render_charts(result)
    render_recommendations(result)
