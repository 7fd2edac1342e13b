"""Transaction endpoints — CRUD, filtered listing and summary stats under /api/v1/transactions"""
from typing import Annotated
from fastapi import APIRouter, Depends, Query, Request, status
from ledger.engine.pipeline import apply_filters
from ledger.engine.stats import calculate_stats
from ledger.models.filters import FilterSpec
from ledger.models.transaction import TransactionCreate, TransactionUpdate
from ledger.repository.store import TransactionStore
from ledger.routes.common import envelope, error_response, get_store
from ledger.validators.transaction_validator import NotFoundError, ValidationError

router = APIRouter(prefix="/api/v1/transactions", tags=["transactions"])


def _failure(store: TransactionStore, transaction_id: str | None = None):
    """Map the store's last error onto an HTTP error."""
    if transaction_id is not None and store.get(transaction_id) is None:
        return error_response(NotFoundError.http_status, NotFoundError.code, store.error or "Not found")
    return error_response(ValidationError.http_status, ValidationError.code, store.error or "Invalid transaction")


@router.get("")
async def list_transactions(
    request: Request,
    filters: Annotated[FilterSpec, Query()],
    store: TransactionStore = Depends(get_store),
) -> dict:
    """List transactions narrowed and ordered by the filter specification."""
    view = apply_filters(store.transactions, filters)
    return envelope([t.model_dump(mode="json") for t in view], request)


@router.get("/stats")
async def get_stats(request: Request, store: TransactionStore = Depends(get_store)) -> dict:
    """Summary figures over every transaction, ignoring any filters."""
    return envelope(calculate_stats(store.transactions).model_dump(mode="json"), request)


@router.get("/{transaction_id}")
async def get_transaction(
    transaction_id: str,
    request: Request,
    store: TransactionStore = Depends(get_store),
) -> dict:
    txn = store.get(transaction_id)
    if txn is None:
        raise error_response(
            status.HTTP_404_NOT_FOUND,
            NotFoundError.code,
            f"Transaction with ID {transaction_id} not found",
        )
    return envelope(txn.model_dump(mode="json"), request)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_transaction(
    body: TransactionCreate,
    request: Request,
    store: TransactionStore = Depends(get_store),
) -> dict:
    """Record a new transaction. The id and date are assigned by the store."""
    transaction_id = store.create(body)
    if not transaction_id:
        raise _failure(store)
    return envelope(store.get(transaction_id).model_dump(mode="json"), request)


@router.patch("/{transaction_id}")
async def update_transaction(
    transaction_id: str,
    body: TransactionUpdate,
    request: Request,
    store: TransactionStore = Depends(get_store),
) -> dict:
    """Apply a partial update; only the fields present in the body change."""
    if not store.update(transaction_id, body):
        raise _failure(store, transaction_id)
    return envelope(store.get(transaction_id).model_dump(mode="json"), request)


@router.delete("/{transaction_id}")
async def delete_transaction(
    transaction_id: str,
    request: Request,
    store: TransactionStore = Depends(get_store),
) -> dict:
    if not store.delete(transaction_id):
        raise _failure(store, transaction_id)
    return envelope({"deleted": transaction_id}, request)
