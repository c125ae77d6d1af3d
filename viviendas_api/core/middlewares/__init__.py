"""미들웨어 모듈"""

from viviendas_api.core.middlewares.context import (
    get_request_id,
    set_request_id,
)
from viviendas_api.core.middlewares.logging import LoggingMiddleware

__all__ = [
    "LoggingMiddleware",
    "get_request_id",
    "set_request_id",
]
