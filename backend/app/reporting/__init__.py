"""Read-side projections behind the dashboard and the per-entity stat endpoints."""

from .aggregation import count_by_predicate, count_distinct, group_count, has_status, sum_by
from .buckets import (
    DEFAULT_REPORTING_TIMEZONE,
    MonthBucket,
    assign_to_bucket,
    format_month_label_pt_br,
    monthly_window,
    parse_timestamp,
    resolve_timezone,
)
from .charts import Arc, ChartType, Circle, Line, Rect, render_chart
from .overview import (
    MONTHLY_REVENUE_WINDOW,
    compose_overview,
    summarize_clients,
    summarize_employees,
    summarize_quotes,
    summarize_receipts,
    summarize_services,
)
from .records import ClientRecord, EmployeeRecord, QuoteRecord, ReceiptRecord, ServiceRecord

__all__ = [
    "Arc",
    "ChartType",
    "Circle",
    "ClientRecord",
    "DEFAULT_REPORTING_TIMEZONE",
    "EmployeeRecord",
    "Line",
    "MONTHLY_REVENUE_WINDOW",
    "MonthBucket",
    "QuoteRecord",
    "ReceiptRecord",
    "Rect",
    "ServiceRecord",
    "assign_to_bucket",
    "compose_overview",
    "count_by_predicate",
    "count_distinct",
    "format_month_label_pt_br",
    "group_count",
    "has_status",
    "monthly_window",
    "parse_timestamp",
    "render_chart",
    "resolve_timezone",
    "summarize_clients",
    "summarize_employees",
    "summarize_quotes",
    "summarize_receipts",
    "summarize_services",
    "sum_by",
]
