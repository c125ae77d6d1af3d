"""Core 모듈"""

from viviendas_api.core.config import settings
from viviendas_api.core.database import Base, SoftDeleteMixin, get_db
from viviendas_api.core.exceptions import (
    BadRequestException,
    BaseAPIException,
    ConflictException,
    ErrorCode,
    NotFoundException,
    PersistenceException,
    ResourcesNotFoundException,
    UnprocessableEntityException,
)
from viviendas_api.core.logging import get_logger, setup_logging

__all__ = [
    "settings",
    "Base",
    "SoftDeleteMixin",
    "get_db",
    "ErrorCode",
    "BaseAPIException",
    "BadRequestException",
    "NotFoundException",
    "ConflictException",
    "UnprocessableEntityException",
    "ResourcesNotFoundException",
    "PersistenceException",
    "get_logger",
    "setup_logging",
]
