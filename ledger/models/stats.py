from decimal import Decimal
from pydantic import BaseModel


class TransactionStats(BaseModel):
    total_transactions: int
    total_deposits: Decimal
    total_withdrawals: Decimal
    total_transfers: Decimal
    balance: Decimal
    deposit_count: int
    withdrawal_count: int
    transfer_count: int
