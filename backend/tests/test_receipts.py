from __future__ import annotations

import uuid
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from backend.app.services import ReceiptService


@pytest.fixture
def receipt_payload(seed_basic_data) -> dict:
    return {
        "quoteId": seed_basic_data["quote"].id,
        "clientId": seed_basic_data["client"].id,
        "employeeId": seed_basic_data["employee"].id,
        "description": "Saldo da manutenção",
        "amount": "350.00",
        "paymentMethod": "card",
        "dueDate": "2030-02-10",
    }


def test_create_receipt_starts_pending_and_unpaid(client, receipt_payload) -> None:
    response = client.post("/receipts/", json=receipt_payload)

    assert response.status_code == 201, response.text
    payload = response.json()
    assert payload["status"] == "pending"
    assert payload["paidAt"] is None
    assert payload["paymentMethod"] == "card"
    assert payload["client"]["name"] == "Maria Souza"
    assert payload["employee"]["name"] == "João Lima"
    assert payload["quote"]["id"] == receipt_payload["quoteId"]


def test_create_receipt_without_quote(client, receipt_payload) -> None:
    response = client.post("/receipts/", json=dict(receipt_payload, quoteId=None))

    assert response.status_code == 201, response.text
    assert response.json()["quote"] is None


def test_create_receipt_rejects_unknown_references(client, receipt_payload) -> None:
    response = client.post("/receipts/", json=dict(receipt_payload, employeeId=str(uuid.uuid4())))
    assert response.status_code == 400

    response = client.post("/receipts/", json=dict(receipt_payload, quoteId=str(uuid.uuid4())))
    assert response.status_code == 400


def test_create_receipt_validates_fields(client, receipt_payload) -> None:
    assert client.post("/receipts/", json=dict(receipt_payload, amount="-5")).status_code == 422
    assert client.post("/receipts/", json=dict(receipt_payload, paymentMethod="boleto")).status_code == 422
    assert client.post("/receipts/", json=dict(receipt_payload, dueDate="10/02/2030")).status_code == 422


def test_marking_receipt_paid_stamps_paid_at(client, seed_basic_data, monkeypatch) -> None:
    receipt_id = seed_basic_data["receipt"].id
    stamped = datetime(2030, 1, 9, 18, 30, tzinfo=timezone.utc)
    monkeypatch.setattr(ReceiptService, "_now", staticmethod(lambda: stamped))

    response = client.patch(f"/receipts/{receipt_id}", json={"status": "paid"})

    assert response.status_code == 200, response.text
    payload = response.json()
    assert payload["status"] == "paid"
    assert payload["paidAt"].startswith("2030-01-09T18:30:00")


def test_explicit_paid_at_is_kept(client, seed_basic_data) -> None:
    receipt_id = seed_basic_data["receipt"].id

    response = client.patch(
        f"/receipts/{receipt_id}",
        json={"status": "paid", "paidAt": "2025-05-10T15:00:00Z"},
    )

    assert response.status_code == 200, response.text
    assert response.json()["paidAt"].startswith("2025-05-10T15:00:00")


def test_leaving_paid_clears_paid_at(client, seed_basic_data) -> None:
    receipt_id = seed_basic_data["receipt"].id
    client.patch(f"/receipts/{receipt_id}", json={"status": "paid"})

    response = client.patch(f"/receipts/{receipt_id}", json={"status": "cancelled"})

    assert response.status_code == 200
    assert response.json()["paidAt"] is None


def test_paid_at_on_unpaid_receipt_is_rejected(client, seed_basic_data) -> None:
    receipt_id = seed_basic_data["receipt"].id

    response = client.patch(f"/receipts/{receipt_id}", json={"paidAt": "2025-05-10T15:00:00Z"})

    assert response.status_code == 400
    assert "paid_at" in response.json()["detail"]


@pytest.mark.parametrize("paid_at", ["0001-01-01T00:00:00Z", "9999-12-31T23:00:00-05:00"])
def test_out_of_range_paid_at_is_rejected(client, seed_basic_data, paid_at) -> None:
    receipt_id = seed_basic_data["receipt"].id

    response = client.patch(f"/receipts/{receipt_id}", json={"status": "paid", "paidAt": paid_at})

    assert response.status_code == 400
    assert "out of range" in response.json()["detail"]
    assert client.get(f"/receipts/{receipt_id}").json()["status"] == "pending"
    assert client.get("/dashboard/overview").status_code == 200


def test_list_receipts_filters(client, seed_basic_data, receipt_payload) -> None:
    card = client.post("/receipts/", json=receipt_payload).json()
    client.patch(f"/receipts/{card['id']}", json={"status": "paid"})

    by_method = client.get("/receipts/", params={"payment_method": "card"}).json()
    assert [item["id"] for item in by_method["items"]] == [card["id"]]

    pending = client.get("/receipts/", params={"status": "pending"}).json()
    assert [item["paymentMethod"] for item in pending["items"]] == ["pix"]

    for_client = client.get("/receipts/", params={"client_id": receipt_payload["clientId"]}).json()
    assert for_client["total"] == 2


def test_receipt_stats(client, seed_basic_data, receipt_payload) -> None:
    paid = client.post("/receipts/", json=receipt_payload).json()
    client.patch(f"/receipts/{paid['id']}", json={"status": "paid"})

    payload = client.get("/receipts/stats").json()

    assert payload["total"] == 2
    assert payload["paid"] == 1
    assert payload["pending"] == 1
    assert Decimal(payload["totalRevenue"]) == Decimal("350")
    assert Decimal(payload["pendingAmount"]) == Decimal("300")


def test_delete_receipt(client, seed_basic_data) -> None:
    receipt_id = seed_basic_data["receipt"].id

    assert client.delete(f"/receipts/{receipt_id}").status_code == 204
    assert client.get(f"/receipts/{receipt_id}").status_code == 404
    assert client.delete(f"/receipts/{receipt_id}").status_code == 404
