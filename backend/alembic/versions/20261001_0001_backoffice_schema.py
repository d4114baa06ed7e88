"""Clients, employees, services, quotes and receipts."""

from __future__ import annotations

from alembic import context, op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "20261001_0001"
down_revision = None
branch_labels = None
depends_on = None


SQLITE_UUID_DEFAULT = sa.text(
    "lower(hex(randomblob(4)) || '-' || hex(randomblob(2)) || '-4' || "
    "substr(hex(randomblob(2)), 2) || '-' || substr('89ab', abs(random()) % 4 + 1, 1) || "
    "substr(hex(randomblob(2)), 2) || '-' || hex(randomblob(6)))"
)

ENUM_TYPES = {
    "client_status_enum": ("active", "inactive"),
    "employee_status_enum": ("active", "inactive"),
    "service_status_enum": ("active", "inactive"),
    "quote_status_enum": ("pending", "approved", "rejected", "expired"),
    "receipt_status_enum": ("paid", "pending", "cancelled"),
    "payment_method_enum": ("cash", "card", "transfer", "pix"),
}


def _dialect_name() -> str:
    bind = op.get_bind()
    if bind is not None:
        return bind.dialect.name
    ctx = context.get_context()
    return ctx.dialect.name if ctx is not None else ""


def _enum(name: str) -> sa.Enum:
    return sa.Enum(*ENUM_TYPES[name], name=name)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    ]


def upgrade() -> None:
    uuid_type = sa.String(length=36)
    uuid_default = SQLITE_UUID_DEFAULT

    if _dialect_name() == "postgresql":
        uuid_type = postgresql.UUID(as_uuid=True)
        uuid_default = sa.text("gen_random_uuid()")
        op.execute("CREATE EXTENSION IF NOT EXISTS pgcrypto")

    op.create_table(
        "clients",
        sa.Column("client_id", uuid_type, primary_key=True, server_default=uuid_default),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=254), nullable=False),
        sa.Column("phone", sa.String(length=40), nullable=False),
        sa.Column("address", sa.String(), nullable=False),
        sa.Column("city", sa.String(length=120), nullable=False),
        sa.Column("zip_code", sa.String(length=20), nullable=False),
        sa.Column("cpf_cnpj", sa.String(length=20), nullable=False),
        sa.Column(
            "status",
            _enum("client_status_enum"),
            nullable=False,
            server_default="active",
        ),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("clients_email_idx", "clients", ["email"])
    op.create_index("clients_status_idx", "clients", ["status"])

    op.create_table(
        "employees",
        sa.Column("employee_id", uuid_type, primary_key=True, server_default=uuid_default),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=254), nullable=False),
        sa.Column("phone", sa.String(length=40), nullable=False),
        sa.Column("position", sa.String(length=120), nullable=False),
        sa.Column("department", sa.String(length=120), nullable=False),
        sa.Column("salary", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column("hire_date", sa.Date(), nullable=False),
        sa.Column(
            "status",
            _enum("employee_status_enum"),
            nullable=False,
            server_default="active",
        ),
        sa.Column("skills", sa.JSON(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("salary >= 0", name="ck_employees_salary_non_negative"),
    )
    op.create_index("employees_department_idx", "employees", ["department"])
    op.create_index("employees_status_idx", "employees", ["status"])

    op.create_table(
        "services",
        sa.Column("service_id", uuid_type, primary_key=True, server_default=uuid_default),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("category", sa.String(length=120), nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column(
            "duration",
            sa.Numeric(8, 2),
            nullable=False,
            server_default="0",
            comment="Duration in hours",
        ),
        sa.Column(
            "status",
            _enum("service_status_enum"),
            nullable=False,
            server_default="active",
        ),
        sa.Column("materials", sa.JSON(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint("price >= 0", name="ck_services_price_non_negative"),
        sa.CheckConstraint("duration >= 0", name="ck_services_duration_non_negative"),
    )
    op.create_index("services_category_idx", "services", ["category"])
    op.create_index("services_status_idx", "services", ["status"])

    op.create_table(
        "quotes",
        sa.Column("quote_id", uuid_type, primary_key=True, server_default=uuid_default),
        sa.Column(
            "client_id",
            uuid_type,
            sa.ForeignKey("clients.client_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "employee_id",
            uuid_type,
            sa.ForeignKey("employees.employee_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("total_amount", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column(
            "status",
            _enum("quote_status_enum"),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("valid_until", sa.Date(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.CheckConstraint("total_amount >= 0", name="ck_quotes_total_amount_non_negative"),
    )
    op.create_index("quotes_client_idx", "quotes", ["client_id"])
    op.create_index("quotes_employee_idx", "quotes", ["employee_id"])
    op.create_index("quotes_status_idx", "quotes", ["status"])

    op.create_table(
        "quote_services",
        sa.Column(
            "quote_id",
            uuid_type,
            sa.ForeignKey("quotes.quote_id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "service_id",
            uuid_type,
            sa.ForeignKey("services.service_id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )

    op.create_table(
        "receipts",
        sa.Column("receipt_id", uuid_type, primary_key=True, server_default=uuid_default),
        sa.Column(
            "quote_id",
            uuid_type,
            sa.ForeignKey("quotes.quote_id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column(
            "client_id",
            uuid_type,
            sa.ForeignKey("clients.client_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "employee_id",
            uuid_type,
            sa.ForeignKey("employees.employee_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column("payment_method", _enum("payment_method_enum"), nullable=False),
        sa.Column(
            "status",
            _enum("receipt_status_enum"),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("due_date", sa.Date(), nullable=False),
        sa.Column("paid_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint("amount >= 0", name="ck_receipts_amount_non_negative"),
    )
    op.create_index("receipts_client_idx", "receipts", ["client_id"])
    op.create_index("receipts_employee_idx", "receipts", ["employee_id"])
    op.create_index("receipts_status_idx", "receipts", ["status"])
    op.create_index("receipts_payment_method_idx", "receipts", ["payment_method"])


def downgrade() -> None:
    op.drop_table("receipts")
    op.drop_table("quote_services")
    op.drop_table("quotes")
    op.drop_table("services")
    op.drop_table("employees")
    op.drop_table("clients")

    if _dialect_name() == "postgresql":
        for name in ENUM_TYPES:
            op.execute(f"DROP TYPE IF EXISTS {name}")
