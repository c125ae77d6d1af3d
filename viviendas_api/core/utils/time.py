"""시간 측정 유틸리티"""

import time
from contextlib import contextmanager
from typing import Generator


@contextmanager
def measure_time() -> Generator[dict[str, float], None, None]:
    """처리 시간을 측정하는 컨텍스트 매니저

    Usage:
        with measure_time() as timer:
            ...
        elapsed_ms = timer["elapsed_ms"]

    블록 실행 중에도 timer["elapsed_ms"] 는 0.0 으로 읽히며,
    블록을 빠져나갈 때(예외 포함) 최종 값이 기록됩니다.
    """
    timer = {"elapsed_ms": 0.0}
    start = time.perf_counter()
    try:
        yield timer
    finally:
        timer["elapsed_ms"] = (time.perf_counter() - start) * 1000
