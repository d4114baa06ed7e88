"""Router exposing employee management endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from .. import schemas
from ..database import get_db
from ..models import EmployeeStatus
from ..security import require_user
from ..services import EmployeeService, RecordValidationError

router = APIRouter(dependencies=[Depends(require_user)])


@router.get("/", response_model=schemas.EmployeeListResponse)
def list_employees(
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    search: Optional[str] = Query(None, description="Search by name, email or position"),
    department: Optional[str] = Query(None),
    status: Optional[EmployeeStatus] = Query(None),
    db: Session = Depends(get_db),
) -> schemas.EmployeeListResponse:
    items, total = EmployeeService.list_employees(
        db,
        skip=skip,
        limit=limit,
        search=search,
        department=department,
        status=status,
    )
    return schemas.EmployeeListResponse(items=items, total=total, limit=limit, skip=skip)


@router.get("/stats", response_model=schemas.EmployeeStats)
def employee_stats(db: Session = Depends(get_db)) -> schemas.EmployeeStats:
    return schemas.EmployeeStats(**EmployeeService.stats(db))


@router.get("/{employee_id}", response_model=schemas.EmployeeRead)
def get_employee(employee_id: str, db: Session = Depends(get_db)) -> schemas.EmployeeRead:
    employee = EmployeeService.get_employee(db, employee_id)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return employee


@router.post("/", response_model=schemas.EmployeeRead, status_code=status.HTTP_201_CREATED)
def create_employee(
    employee_in: schemas.EmployeeCreate,
    db: Session = Depends(get_db),
) -> schemas.EmployeeRead:
    return EmployeeService.create_employee(db, employee_in)


@router.put("/{employee_id}", response_model=schemas.EmployeeRead)
@router.patch("/{employee_id}", response_model=schemas.EmployeeRead)
def update_employee(
    employee_id: str,
    employee_in: schemas.EmployeeUpdate,
    db: Session = Depends(get_db),
) -> schemas.EmployeeRead:
    employee = EmployeeService.get_employee(db, employee_id)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    try:
        return EmployeeService.update_employee(db, employee, employee_in)
    except RecordValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(employee_id: str, db: Session = Depends(get_db)) -> None:
    employee = EmployeeService.get_employee(db, employee_id)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    EmployeeService.delete_employee(db, employee)
