"""SQLModel table exports."""

from .budget import Budget
from .credit_card import CreditCard
from .emergency_fund import EmergencyFund
from .transaction import Transaction
from .user import User

__all__ = [
    "Budget",
    "CreditCard",
    "EmergencyFund",
    "Transaction",
    "User",
]
