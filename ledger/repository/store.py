"""
In-memory transaction store.

Owns the authoritative, insertion-ordered collection of transactions. Every
mutation goes through a validated entry point; failures never raise across
the store boundary but are reported through the last error instead.
"""
import logging
import uuid
from datetime import datetime, timezone
from typing import Optional
from ledger.models.transaction import Transaction, TransactionCreate, TransactionUpdate
from ledger.validators.transaction_validator import (
    LedgerError,
    require_transaction,
    validate_new_transaction,
    validate_transaction_update,
)

logger = logging.getLogger(__name__)


def apply_update(transaction: Transaction, changes: dict) -> None:
    """Merge already-validated fields into the record in place."""
    for field, value in changes.items():
        setattr(transaction, field, value)


class TransactionStore:
    """Single-writer in-memory store with a last-error and a loading flag."""

    def __init__(self):
        self._transactions: list[Transaction] = []
        self.is_loading: bool = False
        self.error: Optional[str] = None

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """Read-only snapshot of the collection in creation order."""
        return tuple(t.model_copy() for t in self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    # ── Mutations ───────────────────────────────────────────────────────────

    def create(self, data: TransactionCreate) -> str:
        """
        Validate and append a new transaction.

        Returns:
            The new transaction id, or an empty string when rejected
            (the reason is left in ``error``).
        """
        try:
            validate_new_transaction(data)
        except LedgerError as exc:
            return self._fail("create", exc, "")

        transaction = Transaction(
            id=str(uuid.uuid4()),
            date=datetime.now(timezone.utc),
            **data.model_dump(),
        )
        self._transactions.append(transaction)
        self.error = None
        logger.debug("Created transaction %s (%s %s)", transaction.id, transaction.type.value, transaction.amount)
        return transaction.id

    def update(self, transaction_id: str, update: TransactionUpdate) -> bool:
        """Apply a partial update. All-or-nothing: a rejected update changes nothing."""
        changes = update.changes()
        try:
            transaction = require_transaction(self._find(transaction_id), transaction_id)
            validate_transaction_update(changes)
        except LedgerError as exc:
            return self._fail("update", exc, False)

        apply_update(transaction, changes)
        self.error = None
        logger.debug("Updated transaction %s fields=%s", transaction_id, sorted(changes))
        return True

    def delete(self, transaction_id: str) -> bool:
        try:
            transaction = require_transaction(self._find(transaction_id), transaction_id)
        except LedgerError as exc:
            return self._fail("delete", exc, False)

        self._transactions.remove(transaction)
        self.error = None
        logger.debug("Deleted transaction %s", transaction_id)
        return True

    def clear_all(self) -> None:
        self._transactions = []
        self.error = None

    # ── Reads ───────────────────────────────────────────────────────────────

    def get(self, transaction_id: str) -> Optional[Transaction]:
        """Pure lookup; does not touch ``error``."""
        transaction = self._find(transaction_id)
        return transaction.model_copy() if transaction is not None else None

    # ── External orchestration ──────────────────────────────────────────────

    def set_loading(self, loading: bool) -> None:
        self.is_loading = loading

    def set_error(self, error: Optional[str]) -> None:
        self.error = error

    # ── Internals ───────────────────────────────────────────────────────────

    def _find(self, transaction_id: str) -> Optional[Transaction]:
        return next((t for t in self._transactions if t.id == transaction_id), None)

    def _fail(self, operation: str, exc: LedgerError, result):
        self.error = exc.message
        logger.info("Rejected %s: %s (%s)", operation, exc.message, exc.code)
        return result
