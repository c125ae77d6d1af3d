"""유틸리티 모듈"""

from viviendas_api.core.utils.pagination import PageParams
from viviendas_api.core.utils.time import measure_time

__all__ = [
    "PageParams",
    "measure_time",
]
