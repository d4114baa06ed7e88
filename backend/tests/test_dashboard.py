from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from decimal import Decimal
from zoneinfo import ZoneInfo

import pytest

from backend.app import models
from backend.app.services import DashboardService
from backend.app.services.dashboard import reporting_timezone

SAO_PAULO = ZoneInfo("America/Sao_Paulo")


def _mid_month_utc(now: datetime) -> datetime:
    local = now.astimezone(SAO_PAULO)
    return datetime(local.year, local.month, 15, 12, tzinfo=timezone.utc)


@pytest.fixture
def people(db_session) -> tuple:
    client = models.Client(
        name="Paula Reis",
        email="paula@example.com",
        phone="+55 41 93333-2222",
        address="Rua XV, 1",
        city="Curitiba",
        zip_code="80000-000",
        cpf_cnpj="111.222.333-44",
    )
    employee = models.Employee(
        name="Rafael Melo",
        email="rafael@example.com",
        phone="+55 41 94444-1111",
        position="Gerente",
        department="Comercial",
        salary=Decimal("6000"),
        hire_date=date(2022, 8, 1),
    )
    db_session.add_all([client, employee])
    db_session.commit()
    return client, employee


def _add_receipt(
    db_session, people, *, amount, status, method=models.PaymentMethod.PIX, paid_at=None
) -> None:
    client, employee = people
    db_session.add(
        models.Receipt(
            client=client,
            employee=employee,
            description="Serviço",
            amount=Decimal(amount),
            payment_method=method,
            status=status,
            due_date=date(2030, 1, 1),
            paid_at=paid_at,
        )
    )


def _add_service(db_session, name: str, category: str) -> None:
    db_session.add(
        models.Service(
            name=name,
            description=name,
            category=category,
            price=Decimal("100"),
            duration=Decimal("1"),
        )
    )


def test_overview_end_to_end(client, db_session, people) -> None:
    paid_at = _mid_month_utc(datetime.now(timezone.utc))
    _add_receipt(db_session, people, amount="100", status=models.ReceiptStatus.PAID, paid_at=paid_at)
    _add_receipt(
        db_session,
        people,
        amount="200",
        status=models.ReceiptStatus.PAID,
        method=models.PaymentMethod.CARD,
        paid_at=paid_at,
    )
    _add_receipt(db_session, people, amount="50", status=models.ReceiptStatus.PENDING)
    for name, category in [("s1", "A"), ("s2", "A"), ("s3", "B")]:
        _add_service(db_session, name, category)
    db_session.commit()

    response = client.get("/dashboard/overview")

    assert response.status_code == 200, response.text
    payload = response.json()
    receipts = payload["stats"]["receipts"]
    assert receipts["total"] == 3
    assert receipts["paid"] == 2
    assert receipts["pending"] == 1
    assert receipts["totalRevenue"] == 300
    assert receipts["pendingAmount"] == 50

    monthly = payload["charts"]["monthlyRevenue"]
    assert len(monthly) == 6
    assert monthly[-1]["revenue"] == 300
    assert all(point["revenue"] == 0 for point in monthly[:-1])

    categories = {(item["name"], item["value"]) for item in payload["charts"]["serviceCategories"]}
    assert categories == {("A", 2), ("B", 1)}
    methods = {(item["name"], item["value"]) for item in payload["charts"]["paymentMethods"]}
    assert methods == {("pix", 1), ("card", 1)}

    assert payload["stats"]["clients"] == {"total": 1, "active": 1}
    assert payload["stats"]["employees"] == {"total": 1, "active": 1}
    assert payload["stats"]["services"] == {"total": 3, "active": 3}
    assert payload["stats"]["quotes"] == {"total": 0, "pending": 0, "approved": 0}


def test_overview_skips_stored_paid_at_outside_datetime_range(client, db_session, people, caplog) -> None:
    _add_receipt(
        db_session,
        people,
        amount="70",
        status=models.ReceiptStatus.PAID,
        paid_at=datetime(1, 1, 1, tzinfo=timezone.utc),
    )
    db_session.commit()
    caplog.set_level(logging.WARNING, logger="backend.app.services.dashboard")

    response = client.get("/dashboard/overview")

    assert response.status_code == 200, response.text
    payload = response.json()
    assert payload["stats"]["receipts"]["totalRevenue"] == 70
    assert all(point["revenue"] == 0 for point in payload["charts"]["monthlyRevenue"])
    assert "Ignoring unplaceable paid_at" in caplog.text


def test_overview_uses_reporting_timezone_for_boundaries(db_session, people) -> None:
    # 01:00 UTC on April 1st is still March 31st in São Paulo.
    _add_receipt(
        db_session,
        people,
        amount="80",
        status=models.ReceiptStatus.PAID,
        paid_at=datetime(2025, 4, 1, 1, 0, tzinfo=timezone.utc),
    )
    # 03:00 UTC is local midnight on April 1st and opens the April bucket.
    _add_receipt(
        db_session,
        people,
        amount="20",
        status=models.ReceiptStatus.PAID,
        paid_at=datetime(2025, 4, 1, 3, 0, tzinfo=timezone.utc),
    )
    db_session.commit()

    overview = DashboardService.overview(db_session, now=datetime(2025, 4, 20, tzinfo=SAO_PAULO))

    monthly = overview["charts"]["monthly_revenue"]
    assert [point["label"] for point in monthly[-2:]] == ["mar. de 2025", "abr. de 2025"]
    assert monthly[-2]["revenue"] == Decimal("80")
    assert monthly[-1]["revenue"] == Decimal("20")


def test_overview_is_stable_for_a_fixed_instant(db_session, people) -> None:
    _add_receipt(
        db_session,
        people,
        amount="10",
        status=models.ReceiptStatus.PAID,
        paid_at=datetime(2025, 2, 3, tzinfo=timezone.utc),
    )
    db_session.commit()
    now = datetime(2025, 2, 28, tzinfo=SAO_PAULO)

    assert DashboardService.overview(db_session, now=now) == DashboardService.overview(
        db_session, now=now
    )


def test_reporting_timezone_falls_back_on_unknown_zone(monkeypatch, caplog) -> None:
    monkeypatch.setenv("REPORTING_TIMEZONE", "Mars/Olympus_Mons")
    caplog.set_level(logging.WARNING, logger="backend.app.services.dashboard")

    zone = reporting_timezone()

    assert str(zone) == "America/Sao_Paulo"
    assert "Unknown reporting timezone" in caplog.text


@pytest.mark.parametrize(
    ("chart", "kind", "primitive"),
    [
        ("monthly-revenue", "line", "line"),
        ("service-categories", "doughnut", "arc"),
        ("payment-methods", "bar", "rect"),
    ],
)
def test_chart_endpoint_renders_primitives(client, db_session, people, chart, kind, primitive) -> None:
    paid_at = _mid_month_utc(datetime.now(timezone.utc))
    _add_receipt(db_session, people, amount="40", status=models.ReceiptStatus.PAID, paid_at=paid_at)
    _add_service(db_session, "Jardinagem", "Paisagismo")
    db_session.commit()

    response = client.get(f"/dashboard/charts/{chart}", params={"width": 500, "height": 300})

    assert response.status_code == 200, response.text
    payload = response.json()
    assert payload["chart"] == chart
    assert payload["type"] == kind
    assert payload["width"] == 500
    assert payload["primitives"]
    assert payload["primitives"][0]["kind"] == primitive


def test_chart_endpoint_rejects_unknown_chart(client) -> None:
    assert client.get("/dashboard/charts/pie-of-the-day").status_code == 422


def test_dashboard_requires_authentication(anonymous_client) -> None:
    response = anonymous_client.get("/dashboard/overview")

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"
