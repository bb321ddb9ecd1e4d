"""Budget progress and spending totals."""

from __future__ import annotations

from campus_dashboard.schema import Budget, Expense

CURRENCY_SYMBOLS = {
    "USD": "$",
    "INR": "₹",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}
DEFAULT_CURRENCY = "USD"


def currency_symbol(currency: str) -> str:
    return CURRENCY_SYMBOLS.get(currency, CURRENCY_SYMBOLS[DEFAULT_CURRENCY])


def format_amount(amount: float, currency: str = DEFAULT_CURRENCY) -> str:
    return f"{currency_symbol(currency)}{amount:.2f}"


def validate_amount(raw) -> float:
    try:
        amount = float(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError("Amount must be a number") from exc
    if amount <= 0:
        raise ValueError("Amount must be greater than zero")
    return amount


def budget_progress(category_id: str, budgets: list[Budget], expenses: list[Expense]) -> dict:
    """Spent vs. budgeted for one category; the first budget for the category wins."""

    budget = next((b for b in budgets if b.category_id == category_id), None)
    if budget is None:
        return {"spent": 0.0, "total": 0.0, "percentage": 0.0}

    spent = sum(e.amount for e in expenses if e.category_id == category_id)
    percentage = spent / budget.amount * 100.0 if budget.amount > 0 else 0.0
    return {"spent": spent, "total": budget.amount, "percentage": percentage}


def totals(budgets: list[Budget], expenses: list[Expense]) -> dict:
    total_budget = sum(b.amount for b in budgets)
    total_spent = sum(e.amount for e in expenses)
    return {
        "total_budget": total_budget,
        "total_spent": total_spent,
        "remaining": total_budget - total_spent,
    }
