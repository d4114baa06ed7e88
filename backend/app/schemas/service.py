"""Pydantic schemas for the service catalog."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import ConfigDict, Field

from ..models.service import ServiceStatus
from .common import APIModel, PaginatedResponse


class ServiceBase(APIModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str
    category: str = Field(..., min_length=1, max_length=120)
    price: Decimal = Field(..., ge=0)
    duration: Decimal = Field(..., ge=0, description="Expected duration in hours")
    materials: Optional[List[str]] = None


class ServiceCreate(ServiceBase):
    pass


class ServiceUpdate(APIModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    category: Optional[str] = Field(default=None, min_length=1, max_length=120)
    price: Optional[Decimal] = Field(default=None, ge=0)
    duration: Optional[Decimal] = Field(default=None, ge=0)
    status: Optional[ServiceStatus] = None
    materials: Optional[List[str]] = None


class ServiceRead(ServiceBase):
    id: str
    status: ServiceStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ServiceListResponse(PaginatedResponse[ServiceRead]):
    pass


class ServiceStats(APIModel):
    total: int = Field(..., ge=0)
    active: int = Field(..., ge=0)
    categories: int = Field(..., ge=0)
