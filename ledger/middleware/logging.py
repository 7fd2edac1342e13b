import time
import json
import logging
from datetime import datetime, timezone
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("access")


class StructuredLoggingMiddleware(BaseHTTPMiddleware):
    """Emit one structured JSON access log line per request."""

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.monotonic()

        response = await call_next(request)

        duration_ms = round((time.monotonic() - start) * 1000)
        store = getattr(request.app.state, "store", None)

        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "request_id": getattr(request.state, "request_id", "unknown"),
            "method": request.method,
            "path": str(request.url.path),
            "query": str(request.url.query) or None,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
            "ledger_size": len(store) if store is not None else None,
            "ledger_error": store.error if store is not None else None,
        }
        logger.info(json.dumps(log_entry))

        return response
