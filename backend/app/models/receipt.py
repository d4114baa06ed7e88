"""SQLAlchemy model definitions for receipts."""

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
    Text,
    func,
)
from sqlalchemy.orm import relationship

from ..database import Base
from ..db_types import GUID, generate_id


class ReceiptStatus(str, enum.Enum):
    """Settlement states for a receipt."""

    PAID = "paid"
    PENDING = "pending"
    CANCELLED = "cancelled"


class PaymentMethod(str, enum.Enum):
    """Payment channels accepted by the business."""

    CASH = "cash"
    CARD = "card"
    TRANSFER = "transfer"
    PIX = "pix"


class Receipt(Base):
    """A charge issued to a client, optionally originating from a quote."""

    __tablename__ = "receipts"
    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_receipts_amount_non_negative"),
    )

    id = Column("receipt_id", GUID(), primary_key=True, default=generate_id)
    quote_id = Column(
        GUID(),
        ForeignKey("quotes.quote_id", ondelete="SET NULL"),
        nullable=True,
    )
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
    amount = Column(Numeric(12, 2), nullable=False, default=0)
    payment_method = Column(
        Enum(
            PaymentMethod,
            name="payment_method_enum",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
    )
    status = Column(
        Enum(
            ReceiptStatus,
            name="receipt_status_enum",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
        default=ReceiptStatus.PENDING,
    )
    due_date = Column(Date, nullable=False)
    paid_at = Column(DateTime(timezone=True), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    quote = relationship("Quote", back_populates="receipts")
    client = relationship("Client", back_populates="receipts")
    employee = relationship("Employee", back_populates="receipts")


Index("receipts_client_idx", Receipt.client_id)
Index("receipts_employee_idx", Receipt.employee_id)
Index("receipts_status_idx", Receipt.status)
Index("receipts_payment_method_idx", Receipt.payment_method)
