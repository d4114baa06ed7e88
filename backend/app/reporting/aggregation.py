"""Side-effect free counters and sums over in-memory record sequences."""

from __future__ import annotations

from collections import Counter
from decimal import Decimal
from typing import Any, Callable, Dict, Hashable, Iterable, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def count_by_predicate(records: Iterable[T], predicate: Callable[[T], bool]) -> int:
    return sum(1 for record in records if predicate(record))


def sum_by(records: Iterable[Any], field: str) -> Decimal:
    """Add up a numeric attribute across ``records``; missing values count as zero."""

    total = Decimal("0")
    for record in records:
        total += Decimal(str(getattr(record, field, None) or 0))
    return total


def group_count(records: Iterable[T], key_fn: Callable[[T], K]) -> Dict[K, int]:
    """Count records per distinct key.

    Keys are used exactly as returned by ``key_fn``: ``"Pix"`` and ``"pix"`` are
    two different buckets. Keys appear in order of first occurrence.
    """

    return dict(Counter(key_fn(record) for record in records))


def count_distinct(records: Iterable[T], key_fn: Callable[[T], K]) -> int:
    return len({key_fn(record) for record in records})


def has_status(*statuses: Any) -> Callable[[Any], bool]:
    """Build a predicate matching records whose ``status`` is any of ``statuses``."""

    wanted = {getattr(status, "value", status) for status in statuses}

    def predicate(record: Any) -> bool:
        return getattr(record.status, "value", record.status) in wanted

    return predicate
