from datetime import datetime, timezone
from fastapi import HTTPException, Request
from ledger.repository.store import TransactionStore


def get_store(request: Request) -> TransactionStore:
    """FastAPI dependency returning the application's store instance."""
    return request.app.state.store


def envelope(data, request: Request) -> dict:
    return {
        "data": data,
        "meta": {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "request_id": getattr(request.state, "request_id", "unknown"),
        },
    }


def error_response(status_code: int, code: str, message: str) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={"error": {"code": code, "message": message}},
    )
