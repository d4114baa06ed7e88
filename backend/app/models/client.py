"""SQLAlchemy model definitions for clients."""

from __future__ import annotations

import enum

from sqlalchemy import Column, DateTime, Enum, Index, String, Text, func
from sqlalchemy.orm import relationship

from ..database import Base
from ..db_types import GUID, generate_id


class ClientStatus(str, enum.Enum):
    """Lifecycle states for a client."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class Client(Base):
    """Represents a customer of the business."""

    __tablename__ = "clients"

    id = Column("client_id", GUID(), primary_key=True, default=generate_id)
    name = Column(String(200), nullable=False)
    email = Column(String(254), nullable=False)
    phone = Column(String(40), nullable=False)
    address = Column(String, nullable=False)
    city = Column(String(120), nullable=False)
    zip_code = Column(String(20), nullable=False)
    cpf_cnpj = Column(String(20), nullable=False)
    status = Column(
        Enum(
            ClientStatus,
            name="client_status_enum",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
        default=ClientStatus.ACTIVE,
    )
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    quotes = relationship(
        "Quote",
        back_populates="client",
        cascade="all, delete-orphan",
    )
    receipts = relationship(
        "Receipt",
        back_populates="client",
        cascade="all, delete-orphan",
    )


Index("clients_email_idx", Client.email)
Index("clients_status_idx", Client.status)
