"""Routers package."""

from .auth import router as auth_router
from .clients import router as clients_router
from .dashboard import router as dashboard_router
from .employees import router as employees_router
from .quotes import router as quotes_router
from .receipts import router as receipts_router
from .service_catalog import router as service_catalog_router

__all__ = [
    "auth_router",
    "clients_router",
    "dashboard_router",
    "employees_router",
    "quotes_router",
    "receipts_router",
    "service_catalog_router",
]
