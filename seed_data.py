"""
Sample transactions for the ledger demo.

Loaded on startup (after a simulated delay) and by the reset endpoint.
"""
from decimal import Decimal
from ledger.models.transaction import TransactionCreate, TransactionStatus, TransactionType
from ledger.repository.store import TransactionStore

SAMPLE_TRANSACTIONS: tuple[TransactionCreate, ...] = (
    TransactionCreate(
        amount=Decimal("1250.00"),
        description="Salary deposit",
        type=TransactionType.DEPOSIT,
        status=TransactionStatus.COMPLETED,
    ),
    TransactionCreate(
        amount=Decimal("89.99"),
        description="Grocery shopping",
        type=TransactionType.WITHDRAWAL,
        status=TransactionStatus.COMPLETED,
    ),
    TransactionCreate(
        amount=Decimal("500.00"),
        description="Transfer to savings",
        type=TransactionType.TRANSFER,
        status=TransactionStatus.COMPLETED,
        sender="Checking account (1234)",
        recipient="Savings account (5678)",
    ),
    TransactionCreate(
        amount=Decimal("199.50"),
        description="Monthly subscription",
        type=TransactionType.WITHDRAWAL,
        status=TransactionStatus.PENDING,
    ),
    TransactionCreate(
        amount=Decimal("50.00"),
        description="Friend payment",
        type=TransactionType.TRANSFER,
        status=TransactionStatus.COMPLETED,
        sender="Checking account (1234)",
        recipient="John Smith (9876)",
    ),
)


def load_seed_data(store: TransactionStore) -> list[str]:
    """Create every sample transaction through the store's validated path."""
    return [store.create(sample) for sample in SAMPLE_TRANSACTIONS]
