from __future__ import annotations

from decimal import Decimal

from backend.app.models import ReceiptStatus
from backend.app.reporting import (
    ReceiptRecord,
    ServiceRecord,
    count_by_predicate,
    count_distinct,
    group_count,
    has_status,
    sum_by,
)


def _receipt(status: str, amount: str, method: str = "pix") -> ReceiptRecord:
    return ReceiptRecord(status=status, amount=Decimal(amount), payment_method=method)


def test_sum_by_adds_every_amount() -> None:
    receipts = [_receipt("paid", "100.50"), _receipt("paid", "200.25"), _receipt("paid", "0")]

    assert sum_by(receipts, "amount") == Decimal("300.75")


def test_sum_by_is_zero_for_empty_input() -> None:
    assert sum_by([], "amount") == Decimal("0")


def test_sum_by_treats_missing_values_as_zero() -> None:
    class Partial:
        amount = None

    assert sum_by([Partial(), _receipt("paid", "10")], "amount") == Decimal("10")


def test_count_by_predicate_splits_statuses() -> None:
    receipts = [_receipt("paid", "1"), _receipt("pending", "1"), _receipt("paid", "1")]

    assert count_by_predicate(receipts, has_status("paid")) == 2
    assert count_by_predicate(receipts, has_status("pending", "cancelled")) == 1
    assert count_by_predicate([], has_status("paid")) == 0


def test_has_status_accepts_enum_members() -> None:
    record = _receipt("paid", "1")

    assert has_status(ReceiptStatus.PAID)(record)
    assert not has_status(ReceiptStatus.PENDING)(record)


def test_group_count_produces_one_entry_per_category() -> None:
    services = [
        ServiceRecord(status="active", category=category)
        for category in ["Limpeza", "Elétrica", "Limpeza", "Pintura", "Limpeza"]
    ]

    counts = group_count(services, lambda service: service.category)

    assert counts == {"Limpeza": 3, "Elétrica": 1, "Pintura": 1}
    assert sum(counts.values()) == len(services)


def test_group_count_keeps_raw_values_apart() -> None:
    receipts = [_receipt("paid", "1", "Pix"), _receipt("paid", "1", "pix")]

    assert group_count(receipts, lambda receipt: receipt.payment_method) == {"Pix": 1, "pix": 1}


def test_group_count_of_nothing_is_empty() -> None:
    assert group_count([], lambda record: record) == {}


def test_count_distinct() -> None:
    services = [ServiceRecord(status="active", category=c) for c in ["A", "B", "A"]]

    assert count_distinct(services, lambda service: service.category) == 2
