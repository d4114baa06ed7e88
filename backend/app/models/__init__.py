"""Expose SQLAlchemy models for convenient imports."""

from .client import Client, ClientStatus
from .employee import Employee, EmployeeStatus
from .quote import Quote, QuoteStatus, quote_services
from .receipt import PaymentMethod, Receipt, ReceiptStatus
from .service import Service, ServiceStatus

__all__ = [
    "Client",
    "ClientStatus",
    "Employee",
    "EmployeeStatus",
    "PaymentMethod",
    "Quote",
    "QuoteStatus",
    "Receipt",
    "ReceiptStatus",
    "Service",
    "ServiceStatus",
    "quote_services",
]
