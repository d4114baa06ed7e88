"""Expose Pydantic schemas for convenient imports."""

from .auth import LoginRequest, TokenResponse
from .client import (
    ClientBase,
    ClientCreate,
    ClientListResponse,
    ClientRead,
    ClientStats,
    ClientUpdate,
)
from .common import APIModel, PaginatedResponse
from .dashboard import (
    ChartName,
    ChartRender,
    DashboardOverview,
    EntityCounts,
    MonthlyRevenuePoint,
    NamedCount,
    OverviewCharts,
    OverviewReceiptStats,
    OverviewStats,
    QuoteCounts,
)
from .employee import (
    EmployeeBase,
    EmployeeCreate,
    EmployeeListResponse,
    EmployeeRead,
    EmployeeStats,
    EmployeeUpdate,
)
from .quote import (
    QuoteBase,
    QuoteCreate,
    QuoteListResponse,
    QuoteRead,
    QuoteStats,
    QuoteSummary,
    QuoteUpdate,
)
from .receipt import (
    ReceiptBase,
    ReceiptCreate,
    ReceiptListResponse,
    ReceiptRead,
    ReceiptStats,
    ReceiptUpdate,
)
from .service import (
    ServiceBase,
    ServiceCreate,
    ServiceListResponse,
    ServiceRead,
    ServiceStats,
    ServiceUpdate,
)

__all__ = [
    "APIModel",
    "ChartName",
    "ChartRender",
    "ClientBase",
    "ClientCreate",
    "ClientListResponse",
    "ClientRead",
    "ClientStats",
    "ClientUpdate",
    "DashboardOverview",
    "EmployeeBase",
    "EmployeeCreate",
    "EmployeeListResponse",
    "EmployeeRead",
    "EmployeeStats",
    "EmployeeUpdate",
    "EntityCounts",
    "LoginRequest",
    "MonthlyRevenuePoint",
    "NamedCount",
    "OverviewCharts",
    "OverviewReceiptStats",
    "OverviewStats",
    "PaginatedResponse",
    "QuoteBase",
    "QuoteCounts",
    "QuoteCreate",
    "QuoteListResponse",
    "QuoteRead",
    "QuoteStats",
    "QuoteSummary",
    "QuoteUpdate",
    "ReceiptBase",
    "ReceiptCreate",
    "ReceiptListResponse",
    "ReceiptRead",
    "ReceiptStats",
    "ReceiptUpdate",
    "ServiceBase",
    "ServiceCreate",
    "ServiceListResponse",
    "ServiceRead",
    "ServiceStats",
    "ServiceUpdate",
    "TokenResponse",
]
