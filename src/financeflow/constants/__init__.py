"""Shared enumerations."""

from .kinds import BudgetStatus, TransactionKind

__all__ = ["BudgetStatus", "TransactionKind"]
