"""SQLAlchemy model definitions for employees."""

from __future__ import annotations

import enum

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Enum,
    Index,
    Numeric,
    String,
    func,
)
from sqlalchemy.orm import relationship

from ..database import Base
from ..db_types import GUID, generate_id, json_type


class EmployeeStatus(str, enum.Enum):
    """Employment states tracked for staff members."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class Employee(Base):
    """Represents a staff member who prepares quotes and issues receipts."""

    __tablename__ = "employees"
    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_employees_salary_non_negative"),
    )

    id = Column("employee_id", GUID(), primary_key=True, default=generate_id)
    name = Column(String(200), nullable=False)
    email = Column(String(254), nullable=False)
    phone = Column(String(40), nullable=False)
    position = Column(String(120), nullable=False)
    department = Column(String(120), nullable=False)
    salary = Column(Numeric(12, 2), nullable=False, default=0)
    hire_date = Column(Date, nullable=False)
    status = Column(
        Enum(
            EmployeeStatus,
            name="employee_status_enum",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
        default=EmployeeStatus.ACTIVE,
    )
    skills = Column(json_type(), nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    quotes = relationship(
        "Quote",
        back_populates="employee",
        cascade="all, delete-orphan",
    )
    receipts = relationship(
        "Receipt",
        back_populates="employee",
        cascade="all, delete-orphan",
    )


Index("employees_department_idx", Employee.department)
Index("employees_status_idx", Employee.status)
