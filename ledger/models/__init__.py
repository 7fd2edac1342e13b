from .transaction import Transaction, TransactionCreate, TransactionUpdate, TransactionType, TransactionStatus
from .filters import ANY, FilterSpec, SortField, SortDirection
from .stats import TransactionStats

__all__ = [
    "Transaction", "TransactionCreate", "TransactionUpdate", "TransactionType", "TransactionStatus",
    "ANY", "FilterSpec", "SortField", "SortDirection", "TransactionStats",
]
