"""Business logic for employees."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

from sqlalchemy.orm import Session

from .. import models, schemas
from ..reporting import EmployeeRecord, summarize_employees
from .common import apply_updates, search_filter

LOGGER = logging.getLogger(__name__)


class EmployeeService:
    """Encapsulates CRUD operations for employees."""

    @staticmethod
    def list_employees(
        db: Session,
        *,
        search: Optional[str] = None,
        department: Optional[str] = None,
        status: Optional[models.EmployeeStatus] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> Tuple[Iterable[models.Employee], int]:
        query = db.query(models.Employee)

        if department:
            query = query.filter(models.Employee.department == department)
        if status is not None:
            query = query.filter(models.Employee.status == status)
        if search and search.strip():
            query = query.filter(
                search_filter(
                    search,
                    models.Employee.name,
                    models.Employee.email,
                    models.Employee.position,
                )
            )

        total = query.count()
        items = (
            query.order_by(models.Employee.name.asc())
            .offset(max(skip, 0))
            .limit(max(limit, 1))
            .all()
        )
        return items, total

    @staticmethod
    def get_employee(db: Session, employee_id: str) -> Optional[models.Employee]:
        return db.query(models.Employee).filter(models.Employee.id == employee_id).first()

    @staticmethod
    def create_employee(db: Session, data: schemas.EmployeeCreate) -> models.Employee:
        employee = models.Employee(**data.model_dump(), status=models.EmployeeStatus.ACTIVE)
        db.add(employee)
        db.commit()
        db.refresh(employee)
        LOGGER.info("Created employee %s", employee.id)
        return employee

    @staticmethod
    def update_employee(
        db: Session, employee: models.Employee, data: schemas.EmployeeUpdate
    ) -> models.Employee:
        apply_updates(employee, data.model_dump(exclude_unset=True))
        db.add(employee)
        db.commit()
        db.refresh(employee)
        return employee

    @staticmethod
    def delete_employee(db: Session, employee: models.Employee) -> None:
        employee_id = employee.id
        db.delete(employee)
        db.commit()
        LOGGER.info("Deleted employee %s", employee_id)

    @staticmethod
    def stats(db: Session) -> dict:
        rows = db.query(models.Employee.status, models.Employee.department).all()
        return summarize_employees(EmployeeRecord.from_row(row) for row in rows)
