# ==============================================================================
# BASE SCHEMAS - Records and Envelopes
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class BaseSchema(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True,
    )


class RecordSchema(BaseSchema):
    """
    A stored record as an adapter returns it.

    Keys this version does not know about are dropped on read.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
    )

    id: str
    is_deleted: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TimestampSchema(BaseSchema):
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PaginatedResponse(BaseModel, Generic[T]):
    """One page of a newest-first listing; built from ``paginate_results``."""

    items: List[T] = Field(default_factory=list)
    total: int
    page: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1, le=100)
    pages: int = Field(..., ge=0)
    has_next: bool = False
    has_prev: bool = False


class APIResponse(BaseModel, Generic[T]):
    """Success envelope; failures use ``AppException.to_dict()`` instead."""

    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None
    errors: Optional[List[dict[str, Any]]] = None

    @classmethod
    def ok(cls, data: T, message: Optional[str] = None) -> "APIResponse[T]":
        return cls(success=True, data=data, message=message)


class HealthResponse(BaseSchema):
    status: str
    version: str
    database: str = Field(..., description="connected or disconnected")
