"""페이지네이션 유틸리티"""

from typing import Optional

from fastapi import Query

from viviendas_api.core.config import settings


class PageParams:
    """선택적 페이지네이션 파라미터 의존성

    page 가 없으면 페이지네이션을 적용하지 않고 전체 결과를 반환합니다.
    page 가 있으면 size 단위로 잘라 해당 페이지만 반환합니다.

    Example::

        @router.get("/usuarios")
        async def list_users(page_params: PageParams = Depends()):
            users = await service.get_users(
                filters, skip=page_params.skip, limit=page_params.limit
            )
    """

    def __init__(
        self,
        page: Optional[int] = Query(None, ge=1, description="페이지 번호"),
        size: Optional[int] = Query(
            None,
            ge=1,
            le=settings.max_page_size,
            description="페이지 크기 (page 와 함께 사용)",
        ),
    ):
        self.page = page
        self.size = size or settings.default_page_size

    @property
    def skip(self) -> Optional[int]:
        """오프셋 계산 (페이지네이션 미적용 시 None)"""
        if self.page is None:
            return None
        return (self.page - 1) * self.size

    @property
    def limit(self) -> Optional[int]:
        if self.page is None:
            return None
        return self.size
