"""Pure financial calculators and the services that persist their results."""

from . import aggregation, amortization, money, savings

__all__ = ["aggregation", "amortization", "money", "savings"]
