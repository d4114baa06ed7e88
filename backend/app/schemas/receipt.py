"""Pydantic schemas for receipts."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import ConfigDict, Field

from ..models.receipt import PaymentMethod, ReceiptStatus
from .client import ClientRead
from .common import APIModel, PaginatedResponse
from .employee import EmployeeRead
from .quote import QuoteSummary


class ReceiptBase(APIModel):
    quote_id: Optional[str] = None
    client_id: str
    employee_id: str
    description: str
    amount: Decimal = Field(..., ge=0)
    payment_method: PaymentMethod
    due_date: date
    notes: Optional[str] = None


class ReceiptCreate(ReceiptBase):
    """Schema used to issue receipts; they start pending and unpaid."""

    pass


class ReceiptUpdate(APIModel):
    quote_id: Optional[str] = None
    client_id: Optional[str] = None
    employee_id: Optional[str] = None
    description: Optional[str] = None
    amount: Optional[Decimal] = Field(default=None, ge=0)
    payment_method: Optional[PaymentMethod] = None
    status: Optional[ReceiptStatus] = None
    due_date: Optional[date] = None
    paid_at: Optional[datetime] = None
    notes: Optional[str] = None


class ReceiptRead(ReceiptBase):
    id: str
    status: ReceiptStatus
    paid_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    client: Optional[ClientRead] = None
    employee: Optional[EmployeeRead] = None
    quote: Optional[QuoteSummary] = None

    model_config = ConfigDict(from_attributes=True)


class ReceiptListResponse(PaginatedResponse[ReceiptRead]):
    pass


class ReceiptStats(APIModel):
    total: int = Field(..., ge=0)
    paid: int = Field(..., ge=0)
    pending: int = Field(..., ge=0)
    total_revenue: Decimal = Field(..., ge=0)
    pending_amount: Decimal = Field(..., ge=0)
