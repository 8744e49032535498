"""Blueprint exports."""

from . import budgets, credit_cards, emergency_fund, transactions

__all__ = [
    "budgets",
    "credit_cards",
    "emergency_fund",
    "transactions",
]
