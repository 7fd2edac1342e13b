from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from pydantic import BaseModel


class TransactionType(str, Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    TRANSFER = "transfer"


class TransactionStatus(str, Enum):
    COMPLETED = "completed"
    PENDING = "pending"
    FAILED = "failed"


class TransactionCreate(BaseModel):
    """Fields supplied by a caller when recording a new transaction.

    Business rules (positive amount, description, transfer counterparties)
    are enforced by the store so that rejections surface as its last error.
    """

    model_config = {"extra": "forbid"}

    amount: Decimal
    description: str = ""
    type: TransactionType = TransactionType.DEPOSIT
    status: TransactionStatus = TransactionStatus.COMPLETED
    sender: Optional[str] = None
    recipient: Optional[str] = None


class TransactionUpdate(BaseModel):
    """Partial update. Only fields explicitly provided are applied."""

    model_config = {"extra": "forbid"}

    amount: Optional[Decimal] = None
    description: Optional[str] = None
    type: Optional[TransactionType] = None
    status: Optional[TransactionStatus] = None
    sender: Optional[str] = None
    recipient: Optional[str] = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class Transaction(BaseModel):
    id: str
    amount: Decimal
    description: str
    type: TransactionType
    status: TransactionStatus
    date: datetime
    sender: Optional[str] = None
    recipient: Optional[str] = None
