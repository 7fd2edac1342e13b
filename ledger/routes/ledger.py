"""Ledger state endpoints — GET/DELETE /api/v1/ledger, POST /api/v1/ledger/reset"""
from typing import Annotated
from fastapi import APIRouter, Depends, Query, Request
from ledger.engine.pipeline import count_active_filters
from ledger.models.filters import FilterSpec
from ledger.repository.store import TransactionStore
from ledger.routes.common import envelope, get_store
from ledger.services.ledger_service import reset_to_sample_data

router = APIRouter(prefix="/api/v1/ledger", tags=["ledger"])


def _state(store: TransactionStore) -> dict:
    return {"is_loading": store.is_loading, "error": store.error, "count": len(store)}


@router.get("")
async def get_ledger_state(request: Request, store: TransactionStore = Depends(get_store)) -> dict:
    """Loading flag, last error and size of the ledger."""
    return envelope(_state(store), request)


@router.get("/filters")
async def describe_filters(request: Request, filters: Annotated[FilterSpec, Query()]) -> dict:
    """Echo the parsed filter specification with its active-filter count."""
    data = filters.model_dump(mode="json")
    data["active_filters"] = count_active_filters(filters)
    return envelope(data, request)


@router.post("/reset")
async def reset_ledger(request: Request, store: TransactionStore = Depends(get_store)) -> dict:
    """Replace every transaction with the sample set."""
    reset_to_sample_data(store)
    return envelope(_state(store), request)


@router.delete("")
async def clear_ledger(request: Request, store: TransactionStore = Depends(get_store)) -> dict:
    store.clear_all()
    return envelope(_state(store), request)
