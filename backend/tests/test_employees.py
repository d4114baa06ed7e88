from __future__ import annotations

import uuid
from decimal import Decimal


def _employee_payload(**overrides) -> dict:
    payload = {
        "name": "Carla Dias",
        "email": "carla@example.com",
        "phone": "+55 11 95555-4444",
        "position": "Orçamentista",
        "department": "Comercial",
        "salary": "4200.00",
        "hireDate": "2024-02-01",
        "skills": ["negociação"],
    }
    payload.update(overrides)
    return payload


def test_create_employee(client) -> None:
    response = client.post("/employees/", json=_employee_payload())

    assert response.status_code == 201, response.text
    payload = response.json()
    assert payload["status"] == "active"
    assert payload["hireDate"] == "2024-02-01"
    assert Decimal(payload["salary"]) == Decimal("4200")
    assert payload["skills"] == ["negociação"]


def test_create_employee_rejects_negative_salary(client) -> None:
    response = client.post("/employees/", json=_employee_payload(salary="-1"))

    assert response.status_code == 422


def test_create_employee_rejects_bad_hire_date(client) -> None:
    response = client.post("/employees/", json=_employee_payload(hireDate="ontem"))

    assert response.status_code == 422


def test_list_employees_filters(client) -> None:
    client.post("/employees/", json=_employee_payload())
    client.post(
        "/employees/",
        json=_employee_payload(
            name="Diego Alves",
            email="diego@example.com",
            position="Eletricista",
            department="Campo",
        ),
    )

    by_department = client.get("/employees/", params={"department": "Campo"}).json()
    assert [item["name"] for item in by_department["items"]] == ["Diego Alves"]

    by_position = client.get("/employees/", params={"search": "eletric"}).json()
    assert by_position["total"] == 1

    everyone = client.get("/employees/").json()
    assert [item["name"] for item in everyone["items"]] == ["Carla Dias", "Diego Alves"]


def test_update_and_delete_employee(client) -> None:
    created = client.post("/employees/", json=_employee_payload()).json()

    updated = client.patch(
        f"/employees/{created['id']}",
        json={"status": "inactive", "skills": ["negociação", "planilhas"]},
    )
    assert updated.status_code == 200
    assert updated.json()["status"] == "inactive"
    assert updated.json()["skills"] == ["negociação", "planilhas"]

    assert client.delete(f"/employees/{created['id']}").status_code == 204
    assert client.get(f"/employees/{created['id']}").status_code == 404


def test_missing_employee_returns_404(client) -> None:
    missing = uuid.uuid4()

    assert client.get(f"/employees/{missing}").status_code == 404
    assert client.put(f"/employees/{missing}", json={"name": "X"}).status_code == 404
    assert client.delete(f"/employees/{missing}").status_code == 404


def test_employee_stats_count_distinct_departments(client) -> None:
    client.post("/employees/", json=_employee_payload())
    client.post("/employees/", json=_employee_payload(email="b@example.com"))
    other = client.post(
        "/employees/", json=_employee_payload(email="c@example.com", department="Campo")
    ).json()
    client.patch(f"/employees/{other['id']}", json={"status": "inactive"})

    response = client.get("/employees/stats")

    assert response.status_code == 200
    assert response.json() == {"total": 3, "active": 2, "departments": 2}
