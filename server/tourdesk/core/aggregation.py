"""Dashboard statistics derived from the current store contents."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from ..models import Tour, TourStatus, Tourist, Transaction, TransactionType

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class DashboardSnapshot:
    """Point-in-time dashboard figures. Money values are exact decimals."""

    active_tours: int
    total_tourists: int
    total_revenue: Decimal
    net_profit: Decimal


def sum_amounts(transactions: Iterable[Transaction], transaction_type: TransactionType) -> Decimal:
    """Sum amounts of one transaction type without going through binary floats."""
    total = Decimal("0")
    for transaction in transactions:
        if transaction.type == transaction_type:
            total += Decimal(str(transaction.amount))
    return total


def compute_dashboard_stats(
    tours: Iterable[Tour],
    tourists: Iterable[Tourist],
    transactions: Iterable[Transaction],
) -> DashboardSnapshot:
    """
    Recompute every dashboard figure from scratch.

    Args:
        tours: All tours currently stored
        tourists: All tourists currently stored
        transactions: All transactions currently stored

    Returns:
        DashboardSnapshot with revenue and profit quantized to cents
    """
    transactions = list(transactions)

    active_tours = sum(1 for tour in tours if tour.status == TourStatus.ACTIVE)
    total_tourists = sum(1 for _ in tourists)

    income = sum_amounts(transactions, TransactionType.INCOME)
    expenses = sum_amounts(transactions, TransactionType.EXPENSE)

    return DashboardSnapshot(
        active_tours=active_tours,
        total_tourists=total_tourists,
        total_revenue=income.quantize(CENTS),
        net_profit=(income - expenses).quantize(CENTS),
    )
