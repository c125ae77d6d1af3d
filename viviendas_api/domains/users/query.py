"""사용자 목록 조회 쿼리 빌더

쿼리 파라미터를 하나의 SELECT 문으로 변환합니다.

- age: 나이 일치
- minAge / maxAge: 나이 범위 (둘 다 있으면 BETWEEN, 하나만 있으면 단방향)
- search: name, email, surname 중 하나라도 부분 일치 (OR)
- 그 외 파라미터: 허용된 텍스트 필드의 부분 일치 (AND)
- sortBy / order: 정렬 (sortBy 가 없으면 name 오름차순)

모든 조건은 AND 로 결합되며, removed 가 true 인 문서는 항상 제외됩니다.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from sqlalchemy import ColumnElement, Select, or_, select

from viviendas_api.domains.users.exceptions import (
    InvalidFilterFieldException,
    InvalidSortFieldException,
)
from viviendas_api.domains.users.models import User

# 일반 필터로 해석하지 않는 예약 파라미터
RESERVED_PARAMS = frozenset(
    {
        "age",
        "minAge",
        "maxAge",
        "removed",
        "sortBy",
        "order",
        "page",
        "size",
        "search",
    }
)

FILTERABLE_FIELDS: tuple[str, ...] = (
    "name",
    "surname",
    "email",
    "dni",
    "picture",
    "description",
)
SEARCH_FIELDS: tuple[str, ...] = ("name", "email", "surname")
SORTABLE_FIELDS: tuple[str, ...] = (
    "name",
    "surname",
    "email",
    "dni",
    "age",
    "created_at",
    "updated_at",
)
SORT_ORDERS = ("asc", "desc")
DEFAULT_SORT_FIELD = "name"


@dataclass
class UserFilters:
    """사용자 목록 필터

    Attributes:
        age: 나이 일치
        min_age: 최소 나이 (포함)
        max_age: 최대 나이 (포함)
        search: name/email/surname 부분 일치 검색어
        fields: 필드명 → 부분 일치 값
        sort_by: 정렬 필드 (None 이면 name 오름차순)
        order: "asc" 또는 "desc". 그 외 값이면 정렬하지 않음

    Raises:
        InvalidFilterFieldException: fields 에 허용되지 않은 필드가 있는 경우
        InvalidSortFieldException: sort_by 가 허용되지 않은 필드인 경우
    """

    age: Optional[int] = None
    min_age: Optional[int] = None
    max_age: Optional[int] = None
    search: Optional[str] = None
    fields: dict[str, str] = field(default_factory=dict)
    sort_by: Optional[str] = None
    order: str = "asc"

    def __post_init__(self) -> None:
        for name in self.fields:
            if name not in FILTERABLE_FIELDS:
                raise InvalidFilterFieldException(name, FILTERABLE_FIELDS)

        if self.sort_by is not None and self.sort_by not in SORTABLE_FIELDS:
            raise InvalidSortFieldException(self.sort_by, SORTABLE_FIELDS)


def extract_field_filters(params: Iterable[tuple[str, str]]) -> dict[str, str]:
    """예약 파라미터를 제외한 나머지를 필드 필터로 추출

    같은 키가 여러 번 오면 마지막 값이 사용됩니다.
    """
    return {key: value for key, value in params if key not in RESERVED_PARAMS}


def _contains(column: Any, value: str) -> ColumnElement[bool]:
    """대소문자를 구분하는 부분 일치 (LIKE, 와일드카드 이스케이프)"""
    return column.contains(value, autoescape=True)


def build_conditions(filters: UserFilters) -> list[ColumnElement[bool]]:
    """WHERE 조건 목록 생성 (AND 결합 대상)"""
    conditions: list[ColumnElement[bool]] = [User.active()]

    if filters.age is not None:
        conditions.append(User.age == filters.age)

    # 범위 필터는 age 일치 조건과 독립적으로 함께 적용됨
    if filters.min_age is not None and filters.max_age is not None:
        conditions.append(User.age.between(filters.min_age, filters.max_age))
    elif filters.min_age is not None:
        conditions.append(User.age >= filters.min_age)
    elif filters.max_age is not None:
        conditions.append(User.age <= filters.max_age)

    for name, value in filters.fields.items():
        conditions.append(_contains(getattr(User, name), value))

    if filters.search is not None:
        conditions.append(
            or_(
                *(
                    _contains(getattr(User, name), filters.search)
                    for name in SEARCH_FIELDS
                )
            )
        )

    return conditions


def build_ordering(filters: UserFilters) -> list[Any]:
    """ORDER BY 절 생성

    sortBy 가 없으면 name 오름차순, order 가 asc/desc 가 아니면 빈 목록.
    """
    if filters.sort_by is None:
        return [getattr(User, DEFAULT_SORT_FIELD).asc()]

    if filters.order not in SORT_ORDERS:
        return []

    column = getattr(User, filters.sort_by)
    return [column.asc() if filters.order == "asc" else column.desc()]


def build_user_query(
    filters: UserFilters,
    skip: Optional[int] = None,
    limit: Optional[int] = None,
) -> Select[tuple[User]]:
    """사용자 목록 SELECT 문 생성

    Args:
        filters: 목록 필터
        skip: 건너뛸 레코드 수 (None 이면 적용 안 함)
        limit: 조회할 최대 레코드 수 (None 이면 적용 안 함)
    """
    query = select(User).where(*build_conditions(filters))

    ordering = build_ordering(filters)
    if ordering:
        query = query.order_by(*ordering)

    if skip:
        query = query.offset(skip)
    if limit is not None:
        query = query.limit(limit)

    return query
