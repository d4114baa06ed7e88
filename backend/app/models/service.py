"""SQLAlchemy model definitions for the catalog of offered services."""

from __future__ import annotations

import enum

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Enum,
    Index,
    Numeric,
    String,
    Text,
    func,
)

from sqlalchemy.orm import relationship

from ..database import Base
from ..db_types import GUID, generate_id, json_type


class ServiceStatus(str, enum.Enum):
    """Availability of a catalog service."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class Service(Base):
    """A service the business offers, priced per job."""

    __tablename__ = "services"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_services_price_non_negative"),
        CheckConstraint("duration >= 0", name="ck_services_duration_non_negative"),
    )

    id = Column("service_id", GUID(), primary_key=True, default=generate_id)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(120), nullable=False)
    price = Column(Numeric(12, 2), nullable=False, default=0)
    duration = Column(Numeric(8, 2), nullable=False, default=0, comment="Duration in hours")
    status = Column(
        Enum(
            ServiceStatus,
            name="service_status_enum",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
        default=ServiceStatus.ACTIVE,
    )
    materials = Column(json_type(), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    quotes = relationship("Quote", secondary="quote_services", back_populates="services")


Index("services_category_idx", Service.category)
Index("services_status_idx", Service.status)
