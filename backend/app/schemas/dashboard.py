"""Schemas for the dashboard overview and chart primitives."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List

from pydantic import Field, field_serializer

from ..reporting import ChartType
from .common import APIModel
from .receipt import ReceiptStats


class EntityCounts(APIModel):
    total: int = Field(..., ge=0)
    active: int = Field(..., ge=0)


class QuoteCounts(APIModel):
    total: int = Field(..., ge=0)
    pending: int = Field(..., ge=0)
    approved: int = Field(..., ge=0)


class OverviewReceiptStats(ReceiptStats):
    """Receipt card; amounts go out as JSON numbers for the chart clients."""

    @field_serializer("total_revenue", "pending_amount", when_used="json")
    def _amount_as_number(self, value: Decimal) -> float:
        return float(value)


class OverviewStats(APIModel):
    """Summary cards shown at the top of the dashboard."""

    clients: EntityCounts
    employees: EntityCounts
    services: EntityCounts
    quotes: QuoteCounts
    receipts: OverviewReceiptStats


class MonthlyRevenuePoint(APIModel):
    label: str
    revenue: Decimal = Field(..., ge=0)

    @field_serializer("revenue", when_used="json")
    def _revenue_as_number(self, value: Decimal) -> float:
        return float(value)


class NamedCount(APIModel):
    name: str
    value: int = Field(..., ge=0)


class OverviewCharts(APIModel):
    monthly_revenue: List[MonthlyRevenuePoint]
    service_categories: List[NamedCount]
    payment_methods: List[NamedCount]


class DashboardOverview(APIModel):
    """Full payload consumed by the dashboard view in the frontend."""

    stats: OverviewStats
    charts: OverviewCharts


class ChartName(str, Enum):
    """Charts rendered on the dashboard."""

    MONTHLY_REVENUE = "monthly-revenue"
    SERVICE_CATEGORIES = "service-categories"
    PAYMENT_METHODS = "payment-methods"


class ChartRender(APIModel):
    chart: ChartName
    type: ChartType
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    primitives: List[Dict[str, Any]] = Field(default_factory=list)
