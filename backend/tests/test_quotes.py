from __future__ import annotations

import uuid
from decimal import Decimal

import pytest

from backend.app import models


@pytest.fixture
def quote_payload(seed_basic_data) -> dict:
    return {
        "clientId": seed_basic_data["client"].id,
        "employeeId": seed_basic_data["employee"].id,
        "serviceIds": [service.id for service in seed_basic_data["services"]],
        "description": "Reforma do banheiro",
        "totalAmount": "1200.00",
        "validUntil": "2030-06-30",
    }


def test_create_quote_embeds_related_records(client, quote_payload) -> None:
    response = client.post("/quotes/", json=quote_payload)

    assert response.status_code == 201, response.text
    payload = response.json()
    assert payload["status"] == "pending"
    assert payload["client"]["id"] == quote_payload["clientId"]
    assert payload["employee"]["id"] == quote_payload["employeeId"]
    assert sorted(payload["serviceIds"]) == sorted(quote_payload["serviceIds"])
    assert {service["category"] for service in payload["services"]} == {"Limpeza", "Elétrica"}
    assert Decimal(payload["totalAmount"]) == Decimal("1200")


def test_create_quote_rejects_unknown_references(client, quote_payload) -> None:
    unknown_client = dict(quote_payload, clientId=str(uuid.uuid4()))
    response = client.post("/quotes/", json=unknown_client)
    assert response.status_code == 400
    assert "Client" in response.json()["detail"]

    unknown_service = dict(quote_payload, serviceIds=[str(uuid.uuid4())])
    response = client.post("/quotes/", json=unknown_service)
    assert response.status_code == 400
    assert "Unknown services" in response.json()["detail"]


def test_update_quote_rejects_unknown_status(client, seed_basic_data) -> None:
    quote_id = seed_basic_data["quote"].id

    response = client.patch(f"/quotes/{quote_id}", json={"status": "signed"})

    assert response.status_code == 422


def test_create_quote_ignores_duplicate_service_ids(client, quote_payload) -> None:
    first = quote_payload["serviceIds"][0]
    payload = dict(quote_payload, serviceIds=[first, first])

    response = client.post("/quotes/", json=payload)

    assert response.status_code == 201, response.text
    assert response.json()["serviceIds"] == [first]


def test_update_quote_replaces_services_and_status(client, seed_basic_data) -> None:
    quote_id = seed_basic_data["quote"].id
    wiring_id = seed_basic_data["services"][1].id

    response = client.put(
        f"/quotes/{quote_id}",
        json={"serviceIds": [wiring_id], "status": "approved"},
    )

    assert response.status_code == 200, response.text
    payload = response.json()
    assert payload["serviceIds"] == [wiring_id]
    assert payload["status"] == "approved"


def test_list_quotes_filters(client, seed_basic_data, quote_payload) -> None:
    other = client.post("/quotes/", json=quote_payload).json()
    client.patch(f"/quotes/{other['id']}", json={"status": "approved"})

    approved = client.get("/quotes/", params={"status": "approved"}).json()
    assert [item["id"] for item in approved["items"]] == [other["id"]]

    for_client = client.get("/quotes/", params={"client_id": quote_payload["clientId"]}).json()
    assert for_client["total"] == 2

    for_stranger = client.get("/quotes/", params={"employee_id": str(uuid.uuid4())}).json()
    assert for_stranger == {"items": [], "total": 0, "limit": 50, "skip": 0}


def test_delete_quote_keeps_receipts(client, db_session, seed_basic_data) -> None:
    quote_id = seed_basic_data["quote"].id
    receipt_id = seed_basic_data["receipt"].id

    assert client.delete(f"/quotes/{quote_id}").status_code == 204
    assert client.get(f"/quotes/{quote_id}").status_code == 404

    receipt = client.get(f"/receipts/{receipt_id}").json()
    assert receipt["quoteId"] is None
    assert receipt["quote"] is None
    assert db_session.query(models.quote_services).count() == 0


def test_quote_stats(client, seed_basic_data, quote_payload) -> None:
    approved = client.post("/quotes/", json=quote_payload).json()
    client.patch(f"/quotes/{approved['id']}", json={"status": "approved"})

    payload = client.get("/quotes/stats").json()

    assert payload["total"] == 2
    assert payload["pending"] == 1
    assert payload["approved"] == 1
    assert Decimal(payload["totalValue"]) == Decimal("1850")
