"""SQLAlchemy model definitions for quotes."""

from __future__ import annotations

import enum

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Numeric,
    Table,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from ..database import Base
from ..db_types import GUID, generate_id


class QuoteStatus(str, enum.Enum):
    """Negotiation states for a quote."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    EXPIRED = "expired"


quote_services = Table(
    "quote_services",
    Base.metadata,
    Column(
        "quote_id",
        GUID(),
        ForeignKey("quotes.quote_id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "service_id",
        GUID(),
        ForeignKey("services.service_id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Quote(Base):
    """A priced proposal of one or more services for a client."""

    __tablename__ = "quotes"
    __table_args__ = (
        CheckConstraint("total_amount >= 0", name="ck_quotes_total_amount_non_negative"),
    )

    id = Column("quote_id", GUID(), primary_key=True, default=generate_id)
    client_id = Column(
        GUID(),
        ForeignKey("clients.client_id", ondelete="CASCADE"),
        nullable=False,
    )
    employee_id = Column(
        GUID(),
        ForeignKey("employees.employee_id", ondelete="CASCADE"),
        nullable=False,
    )
    description = Column(Text, nullable=False)
    total_amount = Column(Numeric(12, 2), nullable=False, default=0)
    status = Column(
        Enum(
            QuoteStatus,
            name="quote_status_enum",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
        default=QuoteStatus.PENDING,
    )
    valid_until = Column(Date, nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    client = relationship("Client", back_populates="quotes")
    employee = relationship("Employee", back_populates="quotes")
    services = relationship(
        "Service",
        secondary=quote_services,
        back_populates="quotes",
        order_by="Service.name",
    )
    receipts = relationship("Receipt", back_populates="quote")

    @property
    def service_ids(self) -> list[str]:
        return [service.id for service in self.services]


Index("quotes_client_idx", Quote.client_id)
Index("quotes_employee_idx", Quote.employee_id)
Index("quotes_status_idx", Quote.status)
