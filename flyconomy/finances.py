"""Income and expense ledger of the airline."""

from __future__ import annotations

from .entities import Timestamp


class CompanyFinances:
    """Timestamped income and expense entries; cash is derived from them."""

    def __init__(self, cash: float | None = None) -> None:
        self.income: list[tuple[Timestamp, float]] = []
        self.expenses: list[tuple[Timestamp, float]] = []
        if cash is not None:
            self.income.append((0, cash))

    def __repr__(self) -> str:
        return f"CompanyFinances(income={self.income!r}, expenses={self.expenses!r})"

    def add_income(self, timestamp: Timestamp, income: float) -> None:
        self.income.append((timestamp, income))

    def add_expense(self, timestamp: Timestamp, expense: float) -> None:
        self.expenses.append((timestamp, expense))

    def cash(self, timestamp: Timestamp) -> float:
        """Cash available at the given time."""
        return self.total_income(timestamp) - self.total_expenses(timestamp)

    def total_income(self, timestamp: Timestamp) -> float:
        return sum((amount for when, amount in self.income if when <= timestamp), 0.0)

    def total_expenses(self, timestamp: Timestamp) -> float:
        return sum((amount for when, amount in self.expenses if when <= timestamp), 0.0)