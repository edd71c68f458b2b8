import pytest

from finance.allocation import ALLOCATIONS, select_allocation


@pytest.mark.parametrize(
    "risk, expected",
    [
        ("conservative", (30, 50, 10, 10)),
        ("moderate", (50, 30, 15, 5)),
        ("aggressive", (70, 15, 10, 5)),
    ],
)
def test_allocation_table(risk, expected):
    target = select_allocation(risk)
    assert (target.stocks, target.bonds, target.real_estate, target.cash) == expected
    assert target.total == 100


def test_unknown_risk_raises():
    with pytest.raises(ValueError):
        select_allocation("yolo")


def test_table_is_read_only():
    with pytest.raises(TypeError):
        ALLOCATIONS["reckless"] = ALLOCATIONS["aggressive"]
