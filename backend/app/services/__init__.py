"""Service layer encapsulating business logic for API routers."""

from .clients import ClientService
from .common import RecordValidationError
from .dashboard import DashboardService
from .employees import EmployeeService
from .quotes import QuoteService
from .receipts import ReceiptService
from .service_catalog import ServiceCatalogService

__all__ = [
    "ClientService",
    "DashboardService",
    "EmployeeService",
    "QuoteService",
    "ReceiptService",
    "RecordValidationError",
    "ServiceCatalogService",
]
