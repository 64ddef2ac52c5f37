import logging
import time
import uuid

from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)


def configure_request_logging(app: FastAPI) -> None:

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = str(uuid.uuid4())
        start_time = time.perf_counter()
        logger.info(
            f"request {request.method} {request.url.path}",
            extra={"request_id": request_id, "method": request.method, "path": request.url.path}
        )

        response = await call_next(request)

        latency_ms = round((time.perf_counter() - start_time) * 1000, 2)
        response.headers["X-Request-ID"] = request_id
        logger.info(
            f"response {response.status_code} {request.method} {request.url.path}",
            extra={"request_id": request_id, "status": response.status_code, "latency_ms": latency_ms}
        )
        return response
