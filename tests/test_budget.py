from datetime import date

import pytest

from campus_dashboard.budget import budget_progress, currency_symbol, format_amount, totals, validate_amount
from campus_dashboard.schema import Budget, Expense


def sample_budgets():
    return [
        Budget("b1", "u1", "food", 200.0, "monthly", date(2025, 3, 1), date(2025, 3, 31)),
        Budget("b2", "u1", "books", 0.0, "monthly", date(2025, 3, 1), date(2025, 3, 31)),
    ]


def sample_expenses():
    return [
        Expense("e1", "u1", "food", 50.0, "groceries", date(2025, 3, 2)),
        Expense("e2", "u1", "food", 30.0, "canteen", date(2025, 3, 5)),
        Expense("e3", "u1", "books", 45.0, "textbook", date(2025, 3, 6)),
    ]


def test_budget_progress():
    progress = budget_progress("food", sample_budgets(), sample_expenses())
    assert progress == {"spent": 80.0, "total": 200.0, "percentage": 40.0}


def test_budget_progress_without_budget_or_amount():
    assert budget_progress("travel", sample_budgets(), sample_expenses())["percentage"] == 0.0
    assert budget_progress("books", sample_budgets(), sample_expenses())["percentage"] == 0.0


def test_totals():
    assert totals(sample_budgets(), sample_expenses()) == {
        "total_budget": 200.0,
        "total_spent": 125.0,
        "remaining": 75.0,
    }


def test_currency_formatting():
    assert currency_symbol("INR") == "₹"
    assert currency_symbol("XYZ") == "$"
    assert format_amount(12.5, "EUR") == "€12.50"


def test_validate_amount():
    assert validate_amount("12.40") == 12.4
    with pytest.raises(ValueError):
        validate_amount("0")
    with pytest.raises(ValueError):
        validate_amount("twelve")
