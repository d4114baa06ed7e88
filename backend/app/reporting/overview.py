"""Dashboard payload assembly and per-entity summaries."""

from __future__ import annotations

from datetime import datetime, tzinfo
from decimal import Decimal
from typing import Any, Dict, Iterable, List

from .aggregation import count_by_predicate, count_distinct, group_count, has_status, sum_by
from .buckets import LabelFormatter, assign_to_bucket, monthly_window
from .records import ClientRecord, EmployeeRecord, QuoteRecord, ReceiptRecord, ServiceRecord

MONTHLY_REVENUE_WINDOW = 6

_is_active = has_status("active")
_is_paid = has_status("paid")
_is_pending = has_status("pending")
_is_approved = has_status("approved")


def _named_counts(counts: Dict[Any, int]) -> List[dict]:
    return [{"name": str(name), "value": value} for name, value in counts.items()]


def summarize_clients(clients: Iterable[ClientRecord]) -> dict:
    records = list(clients)
    return {
        "total": len(records),
        "active": count_by_predicate(records, _is_active),
        "inactive": count_by_predicate(records, has_status("inactive")),
    }


def summarize_employees(employees: Iterable[EmployeeRecord]) -> dict:
    records = list(employees)
    return {
        "total": len(records),
        "active": count_by_predicate(records, _is_active),
        "departments": count_distinct(records, lambda employee: employee.department),
    }


def summarize_services(services: Iterable[ServiceRecord]) -> dict:
    records = list(services)
    return {
        "total": len(records),
        "active": count_by_predicate(records, _is_active),
        "categories": count_distinct(records, lambda service: service.category),
    }


def summarize_quotes(quotes: Iterable[QuoteRecord]) -> dict:
    records = list(quotes)
    return {
        "total": len(records),
        "pending": count_by_predicate(records, _is_pending),
        "approved": count_by_predicate(records, _is_approved),
        "total_value": sum_by(records, "total_amount"),
    }


def summarize_receipts(receipts: Iterable[ReceiptRecord]) -> dict:
    records = list(receipts)
    paid = [receipt for receipt in records if _is_paid(receipt)]
    pending = [receipt for receipt in records if _is_pending(receipt)]
    return {
        "total": len(records),
        "paid": len(paid),
        "pending": len(pending),
        "total_revenue": sum_by(paid, "amount"),
        "pending_amount": sum_by(pending, "amount"),
    }


def monthly_revenue(
    paid_receipts: Iterable[ReceiptRecord],
    *,
    now: datetime,
    window_size: int = MONTHLY_REVENUE_WINDOW,
    tz: tzinfo | str | None = None,
    label_formatter: LabelFormatter | None = None,
) -> List[dict]:
    """Sum paid amounts per month over the trailing window ending at ``now``."""

    buckets = monthly_window(now, window_size, tz=tz, label_formatter=label_formatter)
    totals = [Decimal("0") for _ in buckets]
    for receipt in paid_receipts:
        index = assign_to_bucket(receipt.paid_at, buckets)
        if index is None:
            continue
        totals[index] += Decimal(str(receipt.amount or 0))
    return [
        {"label": bucket.label, "revenue": total}
        for bucket, total in zip(buckets, totals)
    ]


def compose_overview(
    *,
    clients: Iterable[ClientRecord],
    employees: Iterable[EmployeeRecord],
    services: Iterable[ServiceRecord],
    quotes: Iterable[QuoteRecord],
    receipts: Iterable[ReceiptRecord],
    now: datetime,
    window_size: int = MONTHLY_REVENUE_WINDOW,
    tz: tzinfo | str | None = None,
    label_formatter: LabelFormatter | None = None,
) -> dict:
    """Build the dashboard document from already fetched record sets.

    The result depends only on the arguments; ``now`` must be supplied by the
    caller. Receipts whose ``paid_at`` cannot be placed in the window still
    count towards the totals but contribute to no monthly bucket.
    """

    client_list = list(clients)
    employee_list = list(employees)
    service_list = list(services)
    quote_list = list(quotes)
    receipt_list = list(receipts)

    paid_receipts = [receipt for receipt in receipt_list if _is_paid(receipt)]

    stats = {
        "clients": {
            "total": len(client_list),
            "active": count_by_predicate(client_list, _is_active),
        },
        "employees": {
            "total": len(employee_list),
            "active": count_by_predicate(employee_list, _is_active),
        },
        "services": {
            "total": len(service_list),
            "active": count_by_predicate(service_list, _is_active),
        },
        "quotes": {
            "total": len(quote_list),
            "pending": count_by_predicate(quote_list, _is_pending),
            "approved": count_by_predicate(quote_list, _is_approved),
        },
        "receipts": summarize_receipts(receipt_list),
    }

    # Categories cover every service; payment methods only paid receipts.
    charts = {
        "monthly_revenue": monthly_revenue(
            paid_receipts,
            now=now,
            window_size=window_size,
            tz=tz,
            label_formatter=label_formatter,
        ),
        "service_categories": _named_counts(
            group_count(service_list, lambda service: service.category)
        ),
        "payment_methods": _named_counts(
            group_count(paid_receipts, lambda receipt: receipt.payment_method)
        ),
    }

    return {"stats": stats, "charts": charts}
