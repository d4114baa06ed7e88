"""Pydantic schemas for quotes."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import ConfigDict, Field

from ..models.quote import QuoteStatus
from .client import ClientRead
from .common import APIModel, PaginatedResponse
from .employee import EmployeeRead
from .service import ServiceRead


class QuoteBase(APIModel):
    client_id: str
    employee_id: str
    service_ids: List[str] = Field(default_factory=list)
    description: str
    total_amount: Decimal = Field(..., ge=0)
    valid_until: date
    notes: Optional[str] = None


class QuoteCreate(QuoteBase):
    """Schema used to draft a quote; quotes start pending."""

    pass


class QuoteUpdate(APIModel):
    client_id: Optional[str] = None
    employee_id: Optional[str] = None
    service_ids: Optional[List[str]] = None
    description: Optional[str] = None
    total_amount: Optional[Decimal] = Field(default=None, ge=0)
    status: Optional[QuoteStatus] = None
    valid_until: Optional[date] = None
    notes: Optional[str] = None


class QuoteSummary(APIModel):
    """Quote fields embedded in receipts."""

    id: str
    description: str
    total_amount: Decimal
    status: QuoteStatus
    valid_until: date

    model_config = ConfigDict(from_attributes=True)


class QuoteRead(QuoteBase):
    id: str
    status: QuoteStatus
    created_at: datetime
    client: Optional[ClientRead] = None
    employee: Optional[EmployeeRead] = None
    services: List[ServiceRead] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class QuoteListResponse(PaginatedResponse[QuoteRead]):
    pass


class QuoteStats(APIModel):
    total: int = Field(..., ge=0)
    pending: int = Field(..., ge=0)
    approved: int = Field(..., ge=0)
    total_value: Decimal = Field(..., ge=0)
