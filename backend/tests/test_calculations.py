import math

import pytest

from app.services.loans import emis_left, monthly_emi, simple_interest, total_amount_due


def test_worked_example_issue_terms():
    total = total_amount_due(100000, 5, 0.1)
    assert total == 150000
    assert monthly_emi(total, 5) == 2500


def test_worked_example_after_first_payment():
    assert emis_left(150000, 1000, 2500) == 60
    assert emis_left(150000, 0, 2500) == 60
    assert emis_left(150000, 2500, 2500) == 59


@pytest.mark.parametrize(
    "principal, years, rate",
    [
        (1000, 3, 0.07),
        (25000.5, 2, 0.125),
        (99999, 7, 0.033),
        (1, 1, 1),
    ],
)
def test_total_is_principal_plus_simple_interest_exactly(principal, years, rate):
    assert simple_interest(principal, years, rate) == principal * years * rate
    assert total_amount_due(principal, years, rate) == principal + principal * years * rate


def test_monthly_emi_rounds_up_to_whole_units():
    # 1210 / 12 = 100.83...
    assert monthly_emi(1210, 1) == 101
    assert monthly_emi(1200, 1) == 100
    assert isinstance(monthly_emi(1210.0, 1), int)


def test_monthly_emi_matches_ceiling_for_fractional_totals():
    total = total_amount_due(1000, 3, 0.07)
    assert monthly_emi(total, 3) == math.ceil(total / 36)


def test_emis_left_counts_partial_installment():
    assert emis_left(1000, 950, 100) == 1
    assert emis_left(1000, 1000, 100) == 0


def test_emis_left_is_not_clamped_on_overpayment():
    assert emis_left(1000, 1250, 100) == math.ceil(-250 / 100)
