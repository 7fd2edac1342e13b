"""
Summary statistics over the full transaction collection.

Pure reductions; only completed transactions contribute to the sums.
"""
from decimal import Decimal
from typing import Iterable
from ledger.models.stats import TransactionStats
from ledger.models.transaction import Transaction, TransactionStatus, TransactionType


def calculate_stats(transactions: Iterable[Transaction]) -> TransactionStats:
    """
    Compute the figures shown by the summary display.

    Returns:
        TransactionStats where ``balance`` is completed deposits minus
        completed withdrawals. Transfers are totalled but do not move
        the balance.

    Example:
        completed deposit 100, completed withdrawal 40, pending withdrawal 40
        → balance 60
    """
    transactions = list(transactions)
    total_deposits = completed_total(transactions, TransactionType.DEPOSIT)
    total_withdrawals = completed_total(transactions, TransactionType.WITHDRAWAL)

    return TransactionStats(
        total_transactions=len(transactions),
        total_deposits=total_deposits,
        total_withdrawals=total_withdrawals,
        total_transfers=completed_total(transactions, TransactionType.TRANSFER),
        balance=total_deposits - total_withdrawals,
        deposit_count=_count(transactions, TransactionType.DEPOSIT),
        withdrawal_count=_count(transactions, TransactionType.WITHDRAWAL),
        transfer_count=_count(transactions, TransactionType.TRANSFER),
    )


def completed_total(transactions: Iterable[Transaction], type_: TransactionType) -> Decimal:
    """Sum of amounts of completed transactions of one type."""
    return sum(
        (t.amount for t in transactions if t.type == type_ and t.status == TransactionStatus.COMPLETED),
        Decimal("0"),
    )


def _count(transactions: Iterable[Transaction], type_: TransactionType) -> int:
    return sum(1 for t in transactions if t.type == type_)
