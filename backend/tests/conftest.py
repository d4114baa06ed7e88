from __future__ import annotations

from datetime import date
from decimal import Decimal
import base64
import os
import sys
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

# Ensure the project root (which exposes the ``backend`` package) is on ``sys.path``
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Tests build the schema with ``create_all``; the lifespan hook must not migrate.
os.environ["RUN_DATABASE_MIGRATIONS"] = "0"

from backend.app.database import Base, get_db
from backend.app.main import app
from backend.app import models
from backend.app.security import generate_password_hash, generate_totp_code


@pytest.fixture(scope="session")
def security_settings() -> dict:
    password = "Adm1nS3cret!"
    otp_secret = base64.b32encode(os.urandom(20)).decode("ascii").rstrip("=")

    os.environ["ADMIN_USERNAME"] = "admin@example.com"
    os.environ["ADMIN_JWT_SECRET"] = base64.urlsafe_b64encode(os.urandom(32)).decode()
    os.environ["ADMIN_TOTP_SECRET"] = otp_secret
    os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "60"
    os.environ["REPORTING_TIMEZONE"] = "America/Sao_Paulo"

    os.environ["ADMIN_PASSWORD_HASH"] = generate_password_hash(password)

    return {
        "username": os.environ["ADMIN_USERNAME"],
        "password": password,
        "otp_secret": otp_secret,
    }


@pytest.fixture(scope="session", autouse=True)
def _ensure_security_settings(security_settings: dict) -> Generator[None, None, None]:
    yield

SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture(scope="session", autouse=True)
def setup_database() -> Generator[None, None, None]:
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    connection = engine.connect()
    transaction = connection.begin()
    session = TestingSessionLocal(bind=connection)
    try:
        yield session
    finally:
        session.close()
        transaction.rollback()
        connection.close()


@pytest.fixture
def anonymous_client(db_session: Session) -> Generator[TestClient, None, None]:
    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            db_session.expire_all()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def client(anonymous_client: TestClient, security_settings: dict) -> TestClient:
    otp_code = generate_totp_code(security_settings["otp_secret"])
    response = anonymous_client.post(
        "/auth/token",
        json={
            "username": security_settings["username"],
            "password": security_settings["password"],
            "otp_code": otp_code,
        },
    )
    assert response.status_code == 200
    token = response.json()["access_token"]
    anonymous_client.headers.update({"Authorization": f"Bearer {token}"})
    return anonymous_client


@pytest.fixture
def seed_basic_data(db_session: Session) -> dict:
    client = models.Client(
        name="Maria Souza",
        email="maria@example.com",
        phone="+55 11 99999-0001",
        address="Rua das Flores, 10",
        city="São Paulo",
        zip_code="01000-000",
        cpf_cnpj="123.456.789-00",
        status=models.ClientStatus.ACTIVE,
    )
    db_session.add(client)

    employee = models.Employee(
        name="João Lima",
        email="joao@example.com",
        phone="+55 11 98888-0002",
        position="Técnico",
        department="Instalação",
        salary=Decimal("3500"),
        hire_date=date(2023, 3, 1),
        status=models.EmployeeStatus.ACTIVE,
        skills=["elétrica", "hidráulica"],
    )
    db_session.add(employee)

    cleaning = models.Service(
        name="Limpeza de caixa d'água",
        description="Limpeza completa",
        category="Limpeza",
        price=Decimal("250"),
        duration=Decimal("3"),
        status=models.ServiceStatus.ACTIVE,
    )
    wiring = models.Service(
        name="Revisão elétrica",
        description="Inspeção do quadro",
        category="Elétrica",
        price=Decimal("400"),
        duration=Decimal("4"),
        status=models.ServiceStatus.ACTIVE,
    )
    db_session.add_all([cleaning, wiring])
    db_session.flush()

    quote = models.Quote(
        client=client,
        employee=employee,
        description="Manutenção anual",
        total_amount=Decimal("650"),
        status=models.QuoteStatus.PENDING,
        valid_until=date(2030, 1, 31),
    )
    quote.services = [cleaning, wiring]
    db_session.add(quote)

    receipt = models.Receipt(
        quote=quote,
        client=client,
        employee=employee,
        description="Sinal da manutenção",
        amount=Decimal("300"),
        payment_method=models.PaymentMethod.PIX,
        status=models.ReceiptStatus.PENDING,
        due_date=date(2030, 1, 10),
    )
    db_session.add(receipt)

    db_session.commit()

    return {
        "client": client,
        "employee": employee,
        "services": [cleaning, wiring],
        "quote": quote,
        "receipt": receipt,
    }

