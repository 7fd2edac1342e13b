"""Unit tests for ledger/engine/stats.py."""
from datetime import datetime, timezone
from decimal import Decimal
from ledger.engine.stats import calculate_stats, completed_total
from ledger.models.stats import TransactionStats
from ledger.models.transaction import Transaction, TransactionStatus, TransactionType


def _txn(type_: TransactionType, amount: str, status: TransactionStatus = TransactionStatus.COMPLETED) -> Transaction:
    return Transaction(
        id=f"{type_.value}-{amount}-{status.value}",
        amount=Decimal(amount),
        description="test",
        type=type_,
        status=status,
        date=datetime(2025, 1, 1, tzinfo=timezone.utc),
    )


def test_balance_is_deposits_minus_withdrawals():
    stats = calculate_stats([
        _txn(TransactionType.DEPOSIT, "100"),
        _txn(TransactionType.WITHDRAWAL, "40"),
    ])
    assert stats.balance == Decimal("60")


def test_pending_withdrawal_does_not_affect_balance():
    stats = calculate_stats([
        _txn(TransactionType.DEPOSIT, "100"),
        _txn(TransactionType.WITHDRAWAL, "40"),
        _txn(TransactionType.WITHDRAWAL, "40", TransactionStatus.PENDING),
    ])
    assert stats.balance == Decimal("60")
    assert stats.total_withdrawals == Decimal("40")
    assert stats.withdrawal_count == 2
    assert stats.total_transactions == 3


def test_transfers_are_totalled_but_do_not_move_balance():
    stats = calculate_stats([
        _txn(TransactionType.TRANSFER, "500"),
        _txn(TransactionType.TRANSFER, "25", TransactionStatus.FAILED),
    ])
    assert stats.total_transfers == Decimal("500")
    assert stats.transfer_count == 2
    assert stats.balance == Decimal("0")


def test_empty_collection():
    stats = calculate_stats([])
    assert isinstance(stats, TransactionStats)
    assert stats.total_transactions == 0
    assert stats.total_deposits == Decimal("0")
    assert stats.balance == Decimal("0")


def test_completed_total_keeps_decimal_precision():
    txns = [_txn(TransactionType.DEPOSIT, "0.10"), _txn(TransactionType.DEPOSIT, "0.20")]
    assert completed_total(txns, TransactionType.DEPOSIT) == Decimal("0.30")
