"""Typed read models consumed by the reporting layer.

Each record carries only the fields the aggregations look at. Rows coming from
the database are projected into these with :meth:`from_row`, which accepts any
object exposing the matching attributes (ORM instances or ``Row`` tuples).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Union

Timestamp = Union[datetime, date, str, None]


def _enum_value(value: Any) -> str:
    if hasattr(value, "value"):
        return str(value.value)
    return str(value)


def _decimal(value: Any) -> Decimal:
    return Decimal(str(value or 0))


@dataclass(frozen=True)
class ClientRecord:
    status: str

    @classmethod
    def from_row(cls, row: Any) -> "ClientRecord":
        return cls(status=_enum_value(row.status))


@dataclass(frozen=True)
class EmployeeRecord:
    status: str
    department: str

    @classmethod
    def from_row(cls, row: Any) -> "EmployeeRecord":
        return cls(status=_enum_value(row.status), department=row.department)


@dataclass(frozen=True)
class ServiceRecord:
    status: str
    category: str
    price: Decimal = Decimal("0")

    @classmethod
    def from_row(cls, row: Any) -> "ServiceRecord":
        return cls(
            status=_enum_value(row.status),
            category=row.category,
            price=_decimal(row.price),
        )


@dataclass(frozen=True)
class QuoteRecord:
    status: str
    total_amount: Decimal = Decimal("0")

    @classmethod
    def from_row(cls, row: Any) -> "QuoteRecord":
        return cls(status=_enum_value(row.status), total_amount=_decimal(row.total_amount))


@dataclass(frozen=True)
class ReceiptRecord:
    """Receipt projection; ``paid_at`` may hold a raw string from external sources."""

    status: str
    amount: Decimal
    payment_method: str
    paid_at: Timestamp = None

    @classmethod
    def from_row(cls, row: Any) -> "ReceiptRecord":
        return cls(
            status=_enum_value(row.status),
            amount=_decimal(row.amount),
            payment_method=_enum_value(row.payment_method),
            paid_at=row.paid_at,
        )
