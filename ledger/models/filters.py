from enum import Enum
from typing import Literal, Union
from pydantic import BaseModel

from ledger.models.transaction import TransactionStatus, TransactionType

ANY = "any"


class SortField(str, Enum):
    DATE = "date"
    AMOUNT = "amount"
    DESCRIPTION = "description"


class SortDirection(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


class FilterSpec(BaseModel):
    # Read from query strings; unrelated parameters (cache busters etc.) are ignored
    model_config = {"extra": "ignore"}

    type: Union[TransactionType, Literal["any"]] = ANY
    status: Union[TransactionStatus, Literal["any"]] = ANY
    search: str = ""
    sort_by: SortField = SortField.DATE
    sort_direction: SortDirection = SortDirection.DESCENDING
