"""Concrete repository implementations using SQLModel."""

from .budget import SQLModelBudgetRepository
from .credit_card import SQLModelCreditCardRepository
from .emergency_fund import SQLModelEmergencyFundRepository
from .transaction import SQLModelTransactionRepository

__all__ = [
    "SQLModelBudgetRepository",
    "SQLModelCreditCardRepository",
    "SQLModelEmergencyFundRepository",
    "SQLModelTransactionRepository",
]
