"""Rule-based investment recommendations.

Rules live in ``RULES`` and are evaluated in order; every rule whose
predicate holds contributes one ``Recommendation``. The order of ``RULES`` is
the display order. Debt Management has no predicate and always comes last.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional, Tuple, Union

from .schemas import Priority, Recommendation


@dataclass(frozen=True)
class RuleContext:
    risk: str
    horizon: str
    monthly_savings: float
    current_savings: float
    age: int


def _by_risk(aggressive, moderate, conservative) -> Mapping[str, object]:
    return MappingProxyType(
        {"aggressive": aggressive, "moderate": moderate, "conservative": conservative}
    )


RETIREMENT_RATES = _by_risk(0.4, 0.3, 0.25)
INDEX_FUND_RATES = _by_risk(0.3, 0.25, 0.15)

RETIREMENT_DETAILS = _by_risk(
    "Focus on low-cost index funds: 70% stocks (VTI, VOO), 30% bonds (BND)",
    "Balanced portfolio: 50% stocks (VTI, VXUS), 30% bonds (BND), 20% target-date fund",
    "Conservative mix: 30% stocks (VTI), 50% bonds (BND, VGIT), 20% stable value",
)
INDEX_FUND_DETAILS = _by_risk(
    "Growth-focused: VTI (Total Market), QQQ (Tech), VGT (Technology), VXUS (International)",
    "Balanced growth: VOO (S&P 500), VTI (Total Market), VXUS (International), BND (Bonds)",
    "Income-focused: SCHD (Dividend), VYM (High Dividend), VCIT (Corporate Bonds)",
)


@dataclass(frozen=True)
class RecommendationRule:
    category: str
    priority: Priority
    action: str
    allocation: Callable[[RuleContext], float]
    details: Union[str, Mapping[str, str]]
    applies: Optional[Callable[[RuleContext], bool]] = None

    def matches(self, ctx: RuleContext) -> bool:
        return self.applies is None or bool(self.applies(ctx))

    def detail_for(self, risk: str) -> str:
        if isinstance(self.details, str):
            return self.details
        return self.details[risk]

    def build(self, ctx: RuleContext) -> Recommendation:
        return Recommendation(
            category=self.category,
            priority=self.priority,
            action=self.action,
            allocation=self.allocation(ctx),
            details=self.detail_for(ctx.risk),
        )


RULES: Tuple[RecommendationRule, ...] = (
    RecommendationRule(
        category="Emergency Fund",
        priority="High",
        action="Build 3-6 months of expenses in a high-yield savings account",
        applies=lambda c: c.current_savings < c.monthly_savings * 3,
        allocation=lambda c: min(c.monthly_savings * 0.5, c.monthly_savings),
        details=(
            "Target: High-yield savings (4-5% APY). "
            "Recommended: Marcus, Ally, or American Express savings accounts."
        ),
    ),
    RecommendationRule(
        category="Retirement (401k/IRA)",
        priority="High",
        action="Maximize tax-advantaged retirement accounts",
        applies=lambda c: c.age < 65,
        allocation=lambda c: c.monthly_savings * RETIREMENT_RATES[c.risk],
        details=RETIREMENT_DETAILS,
    ),
    RecommendationRule(
        category="Index Funds/ETFs",
        priority="Medium",
        action="Invest in diversified index funds",
        applies=lambda c: c.monthly_savings > 500 and c.current_savings > c.monthly_savings * 3,
        allocation=lambda c: c.monthly_savings * INDEX_FUND_RATES[c.risk],
        details=INDEX_FUND_DETAILS,
    ),
    RecommendationRule(
        category="Real Estate Investment",
        priority="Medium",
        action="Consider REITs or real estate crowdfunding",
        applies=lambda c: c.current_savings > 5000 and c.monthly_savings > 300,
        allocation=lambda c: c.monthly_savings * 0.15,
        details=(
            "REITs: VNQ (Vanguard Real Estate), SCHH (Real Estate ETF) or platforms like "
            "Fundrise, RealtyMogul for direct investment."
        ),
    ),
    RecommendationRule(
        category="Alternative Investments",
        priority="Low",
        action="Small allocation to growth opportunities",
        applies=lambda c: c.risk == "aggressive" and c.monthly_savings > 1000,
        allocation=lambda c: c.monthly_savings * 0.1,
        details=(
            "Consider: Small-cap growth funds (VB, IJR), sector-specific ETFs (clean energy, AI), "
            "or 5-10% in individual stocks. High risk - diversify heavily."
        ),
    ),
    RecommendationRule(
        category="Debt Management",
        priority="High",
        action="Prioritize high-interest debt",
        allocation=lambda c: 0.0,
        details=(
            "Pay off credit cards and loans over 6% interest before investing. "
            "This guarantees a return equal to the interest rate."
        ),
    ),
)


def generate_recommendations(
    risk: str,
    horizon: str,
    monthly_savings: float,
    current_savings: float,
    age: int,
    rules: Tuple[RecommendationRule, ...] = RULES,
) -> List[Recommendation]:
    if risk not in RETIREMENT_RATES:
        raise ValueError(f"Unknown risk tolerance: {risk!r}")
    ctx = RuleContext(
        risk=risk,
        horizon=horizon,
        monthly_savings=monthly_savings,
        current_savings=current_savings,
        age=age,
    )
    return [rule.build(ctx) for rule in rules if rule.matches(ctx)]
