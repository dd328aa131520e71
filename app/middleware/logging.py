"""リクエストログのミドルウェア"""

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """リクエストごとにメソッド・パス・ステータス・処理時間を記録する"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        client_host = request.client.host if request.client else "unknown"

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                f"[HTTP request failed] {request.method} {request.url.path} - "
                f"client: {client_host} - error: {str(e)} - time: {process_time:.3f}s",
                exc_info=True,
            )
            raise

        process_time = time.time() - start_time
        logger.info(
            f"[HTTP request] {request.method} {request.url.path} - "
            f"client: {client_host} - status: {response.status_code} - time: {process_time:.3f}s"
        )
        response.headers["X-Process-Time"] = f"{process_time:.3f}"
        return response
