from __future__ import annotations

"""
Business rule validation for transaction mutations.

All validations execute in order and the first failing rule wins.
Validators never touch the store — no side effects.
"""
from decimal import Decimal
from typing import Optional
from ledger.models.transaction import Transaction, TransactionCreate, TransactionType

AMOUNT_NOT_POSITIVE = "Transaction amount must be greater than zero"
DESCRIPTION_REQUIRED = "Transaction description is required"
TRANSFER_PARTIES_REQUIRED = "Transfer transactions require both sender and recipient"

# Fields a partial update may not clear.
_REQUIRED_FIELDS = ("amount", "description", "type", "status")


class LedgerError(Exception):
    """Base for failures reported through the store's last error."""

    code = "LEDGER_ERROR"
    http_status = 400

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(LedgerError):
    """Raised when a business rule validation fails."""

    code = "VALIDATION_ERROR"
    http_status = 422


class NotFoundError(LedgerError):
    """Raised when an operation references an unknown transaction id."""

    code = "TRANSACTION_NOT_FOUND"
    http_status = 404

    def __init__(self, transaction_id: str):
        super().__init__(
            f"Transaction with ID {transaction_id} not found",
            details={"transaction_id": transaction_id},
        )


def validate_new_transaction(data: TransactionCreate) -> None:
    """
    Run creation rules in order.

    Raises:
        ValidationError: On the first failing rule.
    """
    _validate_amount(data.amount)
    _validate_description(data.description)
    if data.type == TransactionType.TRANSFER:
        _validate_transfer_parties(data.sender, data.recipient)


def validate_transaction_update(changes: dict) -> None:
    """
    Validate the fields of a partial update before anything is applied.

    Switching the type to transfer does not re-check sender and recipient;
    counterparties are only enforced when a transaction is created.
    """
    for field in _REQUIRED_FIELDS:
        if field in changes and changes[field] is None:
            raise ValidationError(f"Transaction {field} cannot be cleared", details={"field": field})
    if "amount" in changes:
        _validate_amount(changes["amount"])


def require_transaction(transaction: Optional[Transaction], transaction_id: str) -> Transaction:
    if transaction is None:
        raise NotFoundError(transaction_id)
    return transaction


def _validate_amount(amount: Decimal) -> None:
    if amount <= Decimal("0"):
        raise ValidationError(AMOUNT_NOT_POSITIVE, details={"amount": str(amount)})


def _validate_description(description: str) -> None:
    if not description:
        raise ValidationError(DESCRIPTION_REQUIRED)


def _validate_transfer_parties(sender: Optional[str], recipient: Optional[str]) -> None:
    if not sender or not recipient:
        raise ValidationError(
            TRANSFER_PARTIES_REQUIRED,
            details={"sender": bool(sender), "recipient": bool(recipient)},
        )
