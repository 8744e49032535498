"""Repository protocol definitions for domain layer."""

from .budget import BudgetRepository
from .credit_card import CreditCardRepository
from .emergency_fund import EmergencyFundRepository
from .transaction import TransactionRepository

__all__ = [
    "BudgetRepository",
    "CreditCardRepository",
    "EmergencyFundRepository",
    "TransactionRepository",
]
