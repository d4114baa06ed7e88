"""Pydantic schemas for employees."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import ConfigDict, Field

from ..models.employee import EmployeeStatus
from .common import APIModel, PaginatedResponse


class EmployeeBase(APIModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., min_length=3, max_length=254)
    phone: str = Field(..., max_length=40)
    position: str = Field(..., min_length=1, max_length=120)
    department: str = Field(..., min_length=1, max_length=120)
    salary: Decimal = Field(..., ge=0)
    hire_date: date
    skills: List[str] = Field(default_factory=list)


class EmployeeCreate(EmployeeBase):
    """Schema used to register employees; they start active."""

    pass


class EmployeeUpdate(APIModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    email: Optional[str] = Field(default=None, min_length=3, max_length=254)
    phone: Optional[str] = Field(default=None, max_length=40)
    position: Optional[str] = Field(default=None, min_length=1, max_length=120)
    department: Optional[str] = Field(default=None, min_length=1, max_length=120)
    salary: Optional[Decimal] = Field(default=None, ge=0)
    hire_date: Optional[date] = None
    status: Optional[EmployeeStatus] = None
    skills: Optional[List[str]] = None


class EmployeeRead(EmployeeBase):
    id: str
    status: EmployeeStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class EmployeeListResponse(PaginatedResponse[EmployeeRead]):
    pass


class EmployeeStats(APIModel):
    total: int = Field(..., ge=0)
    active: int = Field(..., ge=0)
    departments: int = Field(..., ge=0)
