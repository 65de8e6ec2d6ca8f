"""Request logging middleware - one structured log line per request."""

import time
import uuid

import falcon.asgi
import structlog

logger = structlog.get_logger()


class RequestLoggingMiddleware:
    """Binds a request id to the log context and logs method, path, status, timing."""

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        req.context.started_at = time.perf_counter()
        request_id = req.get_header("X-Request-ID") or uuid.uuid4().hex
        req.context.request_id = request_id
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        started = getattr(req.context, "started_at", None)
        elapsed = time.perf_counter() - started if started is not None else 0.0
        resp.set_header("X-Process-Time", f"{elapsed:.6f}")
        request_id = getattr(req.context, "request_id", None)
        if request_id:
            resp.set_header("X-Request-ID", request_id)
        logger.info(
            "request_completed",
            method=req.method,
            path=req.path,
            status=resp.status,
            duration_ms=round(elapsed * 1000, 2),
        )
