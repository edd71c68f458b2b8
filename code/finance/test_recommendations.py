import pytest

from finance.recommendations import RULES, generate_recommendations


def categories(recs):
    return [r.category for r in recs]


def test_sample_profile():
    recs = generate_recommendations("moderate", "5-10", 2600, 10000, 30)
    assert categories(recs) == [
        "Retirement (401k/IRA)",
        "Index Funds/ETFs",
        "Real Estate Investment",
        "Debt Management",
    ]
    assert [r.allocation for r in recs] == pytest.approx([780, 650, 390, 0])


def test_debt_management_always_last_and_unique():
    for args in [
        ("conservative", "0-2", 0, 0, 70),
        ("aggressive", "10+", 5000, 100000, 25),
        ("moderate", "3-5", -300, 0, 40),
    ]:
        recs = generate_recommendations(*args)
        assert categories(recs).count("Debt Management") == 1
        last = recs[-1]
        assert last.category == "Debt Management"
        assert last.priority == "High"
        assert last.allocation == 0


def test_emergency_fund_when_savings_are_thin():
    recs = generate_recommendations("conservative", "5-10", 1000, 1500, 30)
    assert recs[0].category == "Emergency Fund"
    assert recs[0].priority == "High"
    assert recs[0].allocation == pytest.approx(500)


def test_emergency_fund_allocation_with_negative_savings():
    recs = generate_recommendations("moderate", "5-10", -200, -1000, 30)
    assert recs[0].category == "Emergency Fund"
    assert recs[0].allocation == -200


def test_no_retirement_at_65():
    recs = generate_recommendations("moderate", "5-10", 2600, 10000, 65)
    assert "Retirement (401k/IRA)" not in categories(recs)


@pytest.mark.parametrize(
    "risk, retirement, index",
    [("aggressive", 0.4, 0.3), ("moderate", 0.3, 0.25), ("conservative", 0.25, 0.15)],
)
def test_tiered_rates(risk, retirement, index):
    recs = {r.category: r for r in generate_recommendations(risk, "10+", 2000, 50000, 40)}
    assert recs["Retirement (401k/IRA)"].allocation == pytest.approx(2000 * retirement)
    assert recs["Index Funds/ETFs"].allocation == pytest.approx(2000 * index)


def test_details_follow_risk_tier():
    aggressive = generate_recommendations("aggressive", "10+", 2000, 50000, 40)
    conservative = generate_recommendations("conservative", "10+", 2000, 50000, 40)
    assert aggressive[0].details.startswith("Focus on low-cost index funds")
    assert conservative[0].details.startswith("Conservative mix")
    assert "QQQ" in aggressive[1].details
    assert "SCHD" in conservative[1].details


def test_index_funds_need_both_thresholds():
    assert "Index Funds/ETFs" not in categories(generate_recommendations("moderate", "5-10", 500, 50000, 30))
    assert "Index Funds/ETFs" not in categories(generate_recommendations("moderate", "5-10", 2000, 6000, 30))


def test_real_estate_thresholds():
    assert "Real Estate Investment" not in categories(generate_recommendations("moderate", "5-10", 300, 9000, 30))
    assert "Real Estate Investment" not in categories(generate_recommendations("moderate", "5-10", 2000, 5000, 30))


def test_alternative_investments_only_for_aggressive():
    aggressive = generate_recommendations("aggressive", "10+", 1500, 20000, 30)
    moderate = generate_recommendations("moderate", "10+", 1500, 20000, 30)
    alt = [r for r in aggressive if r.category == "Alternative Investments"]
    assert len(alt) == 1
    assert alt[0].priority == "Low"
    assert alt[0].allocation == pytest.approx(150)
    assert "Alternative Investments" not in categories(moderate)
    assert "Alternative Investments" not in categories(generate_recommendations("aggressive", "10+", 1000, 20000, 30))


def test_allocations_never_exceed_positive_savings():
    for risk in ("conservative", "moderate", "aggressive"):
        for savings in (0, 800, 5000):
            for rec in generate_recommendations(risk, "5-10", 3000, savings, 30):
                assert rec.allocation <= 3000


def test_horizon_does_not_change_output():
    outputs = {h: generate_recommendations("moderate", h, 2600, 10000, 30) for h in ("0-2", "3-5", "5-10", "10+")}
    assert len({tuple(v) for v in outputs.values()}) == 1


def test_deterministic():
    first = generate_recommendations("aggressive", "10+", 4000, 30000, 35)
    second = generate_recommendations("aggressive", "10+", 4000, 30000, 35)
    assert first == second


def test_unknown_risk_raises():
    with pytest.raises(ValueError):
        generate_recommendations("reckless", "5-10", 1000, 1000, 30)


def test_rule_table_order():
    assert [r.category for r in RULES] == [
        "Emergency Fund",
        "Retirement (401k/IRA)",
        "Index Funds/ETFs",
        "Real Estate Investment",
        "Alternative Investments",
        "Debt Management",
    ]
    assert RULES[-1].applies is None
