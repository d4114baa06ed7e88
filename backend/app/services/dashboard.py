"""Read-only reporting over the record store."""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, replace
from datetime import datetime, timezone, tzinfo
from typing import List, Optional

from sqlalchemy.orm import Session

from .. import models
from ..reporting import (
    ChartType,
    ClientRecord,
    EmployeeRecord,
    QuoteRecord,
    ReceiptRecord,
    ServiceRecord,
    compose_overview,
    parse_timestamp,
    render_chart,
    resolve_timezone,
)
from ..schemas.dashboard import ChartName

LOGGER = logging.getLogger(__name__)

REPORTING_TIMEZONE_ENV = "REPORTING_TIMEZONE"

CHART_SOURCES = {
    ChartName.MONTHLY_REVENUE: ("monthly_revenue", ChartType.LINE),
    ChartName.SERVICE_CATEGORIES: ("service_categories", ChartType.DOUGHNUT),
    ChartName.PAYMENT_METHODS: ("payment_methods", ChartType.BAR),
}


def reporting_timezone() -> tzinfo:
    """Timezone used for month boundaries, from ``REPORTING_TIMEZONE``."""

    raw = os.getenv(REPORTING_TIMEZONE_ENV, "").strip()
    if not raw:
        return resolve_timezone(None)
    try:
        return resolve_timezone(raw)
    except (KeyError, ValueError):
        # ZoneInfoNotFoundError is a KeyError.
        LOGGER.warning("Unknown reporting timezone %r, using the default", raw)
        return resolve_timezone(None)


def _receipt_record(row, tz: tzinfo) -> ReceiptRecord:
    record = ReceiptRecord.from_row(row)
    raw = record.paid_at
    if raw is None:
        return record
    if isinstance(raw, datetime) and raw.tzinfo is None:
        # The store keeps UTC; SQLite hands it back without an offset.
        raw = raw.replace(tzinfo=timezone.utc)
    paid_at = parse_timestamp(raw, tz)
    if paid_at is None and record.status == models.ReceiptStatus.PAID.value:
        LOGGER.warning("Ignoring unplaceable paid_at %r in monthly revenue", record.paid_at)
    return replace(record, paid_at=paid_at)


class DashboardService:
    """Collects the five record sets and feeds them to the reporting layer."""

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    @staticmethod
    def overview(db: Session, *, now: Optional[datetime] = None) -> dict:
        clients = [ClientRecord.from_row(row) for row in db.query(models.Client.status)]
        employees = [
            EmployeeRecord.from_row(row)
            for row in db.query(models.Employee.status, models.Employee.department)
        ]
        services = [
            ServiceRecord.from_row(row)
            for row in db.query(
                models.Service.status, models.Service.category, models.Service.price
            )
        ]
        quotes = [
            QuoteRecord.from_row(row)
            for row in db.query(models.Quote.status, models.Quote.total_amount)
        ]

        tz = reporting_timezone()
        receipts = [
            _receipt_record(row, tz)
            for row in db.query(
                models.Receipt.status,
                models.Receipt.amount,
                models.Receipt.payment_method,
                models.Receipt.paid_at,
            )
        ]

        return compose_overview(
            clients=clients,
            employees=employees,
            services=services,
            quotes=quotes,
            receipts=receipts,
            now=now or DashboardService._now(),
            tz=tz,
        )

    @staticmethod
    def render(
        db: Session,
        chart: ChartName,
        *,
        width: float,
        height: float,
        now: Optional[datetime] = None,
    ) -> dict:
        key, chart_type = CHART_SOURCES[chart]
        data = DashboardService.overview(db, now=now)["charts"][key]
        primitives: List[dict] = [
            asdict(primitive) for primitive in render_chart(chart_type, data, width, height)
        ]
        return {
            "chart": chart,
            "type": chart_type,
            "width": width,
            "height": height,
            "primitives": primitives,
        }
