"""Calendar-month windows used to bucket timestamped records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, tzinfo
from typing import Any, Callable, Optional, Sequence
from zoneinfo import ZoneInfo

DEFAULT_REPORTING_TIMEZONE = "America/Sao_Paulo"

PT_BR_MONTH_ABBREVIATIONS = (
    "jan.",
    "fev.",
    "mar.",
    "abr.",
    "mai.",
    "jun.",
    "jul.",
    "ago.",
    "set.",
    "out.",
    "nov.",
    "dez.",
)

LabelFormatter = Callable[[date], str]


@dataclass(frozen=True)
class MonthBucket:
    """Half-open interval ``[start, end)`` covering one calendar month."""

    start: datetime
    end: datetime
    label: str

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment < self.end


def format_month_label_pt_br(month_start: date) -> str:
    """Render ``month_start`` the way pt-BR browsers format ``{month: short, year: numeric}``."""

    return f"{PT_BR_MONTH_ABBREVIATIONS[month_start.month - 1]} de {month_start.year}"


def resolve_timezone(tz: tzinfo | str | None) -> tzinfo:
    if tz is None:
        return ZoneInfo(DEFAULT_REPORTING_TIMEZONE)
    if isinstance(tz, str):
        return ZoneInfo(tz)
    return tz


def _localize(moment: datetime, zone: tzinfo) -> datetime:
    # Naive values are wall-clock time in the reporting timezone.
    if moment.tzinfo is None:
        return moment.replace(tzinfo=zone)
    return moment.astimezone(zone)


def parse_timestamp(value: Any, tz: tzinfo | str | None = None) -> Optional[datetime]:
    """Coerce ``value`` into an aware datetime in ``tz``.

    Accepts ``datetime``, ``date`` and ISO-8601 strings (a trailing ``Z`` is
    understood as UTC). Anything else, including unparsable strings and
    instants that fall outside the ``datetime`` range once moved into ``tz``,
    yields ``None``.
    """

    zone = resolve_timezone(tz)
    if value is None:
        return None
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=zone)
    elif isinstance(value, str):
        raw = value.strip()
        if not raw:
            return None
        if raw.endswith(("Z", "z")):
            raw = f"{raw[:-1]}+00:00"
        try:
            moment = datetime.fromisoformat(raw)
        except ValueError:
            return None
    else:
        return None

    try:
        return _localize(moment, zone)
    except (OverflowError, ValueError):
        # e.g. 0001-01-01T00:00Z has no wall time west of UTC.
        return None


def _shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    shifted_year, month_index = divmod(year * 12 + (month - 1) + offset, 12)
    return shifted_year, month_index + 1


def monthly_window(
    now: datetime,
    window_size_months: int,
    *,
    tz: tzinfo | str | None = None,
    label_formatter: LabelFormatter | None = None,
) -> list[MonthBucket]:
    """Return ``window_size_months`` consecutive month buckets ending with ``now``'s month.

    Buckets are ordered oldest first and start at local midnight on the first
    day of each month.
    """

    if window_size_months < 1:
        raise ValueError("window_size_months must be at least 1")

    zone = resolve_timezone(tz)
    formatter = label_formatter or format_month_label_pt_br
    local_now = _localize(now, zone)

    buckets: list[MonthBucket] = []
    for offset in range(window_size_months - 1, -1, -1):
        year, month = _shift_month(local_now.year, local_now.month, -offset)
        next_year, next_month = _shift_month(year, month, 1)
        start = datetime(year, month, 1, tzinfo=zone)
        end = datetime(next_year, next_month, 1, tzinfo=zone)
        buckets.append(MonthBucket(start=start, end=end, label=formatter(start.date())))
    return buckets


def assign_to_bucket(record_timestamp: Any, buckets: Sequence[MonthBucket]) -> Optional[int]:
    """Return the index of the bucket holding ``record_timestamp``.

    ``None`` when the timestamp is missing, cannot be parsed or falls outside
    every bucket.
    """

    if not buckets:
        return None
    moment = parse_timestamp(record_timestamp, buckets[0].start.tzinfo)
    if moment is None:
        return None
    for index, bucket in enumerate(buckets):
        if bucket.contains(moment):
            return index
    return None
