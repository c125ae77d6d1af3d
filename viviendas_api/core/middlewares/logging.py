"""요청/응답 로깅 미들웨어"""

from typing import Callable, cast

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from viviendas_api.core.logging import get_logger
from viviendas_api.core.middlewares.context import set_request_id
from viviendas_api.core.utils.time import measure_time

logger = get_logger(__name__)

# 로깅 제외 경로
EXCLUDE_PATHS = {"/health", "/docs", "/redoc", "/openapi.json", "/favicon.ico"}

REQUEST_ID_HEADER = "X-Request-ID"


class LoggingMiddleware(BaseHTTPMiddleware):
    """요청 ID 부여, 요청/응답 로깅 및 처리 시간 측정 미들웨어"""

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        # 요청 ID 설정 (헤더에서 가져오거나 새로 생성)
        request_id = set_request_id(request.headers.get(REQUEST_ID_HEADER))

        if request.url.path in EXCLUDE_PATHS:
            response = cast(Response, await call_next(request))
            response.headers[REQUEST_ID_HEADER] = request_id
            return response

        # 쿼리 문자열(search, email, dni 값)은 로그에 남기지 않음
        logger.info(
            f"→ {request.method} {request.url.path} "
            f"| Client: {request.client.host if request.client else 'unknown'}"
        )

        with measure_time() as timer:
            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    f"✗ {request.method} {request.url.path} "
                    f"| Error: {str(e)} | Time: {timer['elapsed_ms']:.2f}ms"
                )
                raise

        process_time = timer["elapsed_ms"]

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.2f}ms"

        log_method = (
            logger.info if response.status_code < 400 else logger.warning
        )
        log_method(
            f"{'✓' if response.status_code < 400 else '✗'} "
            f"{request.method} {request.url.path} "
            f"| Status: {response.status_code} | Time: {process_time:.2f}ms"
        )

        return cast(Response, response)
