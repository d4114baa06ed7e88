"""Router for the catalog of services offered to clients."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from .. import schemas
from ..database import get_db
from ..models import ServiceStatus
from ..security import require_user
from ..services import RecordValidationError, ServiceCatalogService

router = APIRouter(dependencies=[Depends(require_user)])


@router.get("/", response_model=schemas.ServiceListResponse)
def list_services(
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    search: Optional[str] = Query(None, description="Search by name, description or category"),
    category: Optional[str] = Query(None),
    status: Optional[ServiceStatus] = Query(None),
    db: Session = Depends(get_db),
) -> schemas.ServiceListResponse:
    items, total = ServiceCatalogService.list_services(
        db,
        skip=skip,
        limit=limit,
        search=search,
        category=category,
        status=status,
    )
    return schemas.ServiceListResponse(items=items, total=total, limit=limit, skip=skip)


@router.get("/stats", response_model=schemas.ServiceStats)
def service_stats(db: Session = Depends(get_db)) -> schemas.ServiceStats:
    return schemas.ServiceStats(**ServiceCatalogService.stats(db))


@router.get("/{service_id}", response_model=schemas.ServiceRead)
def get_service(service_id: str, db: Session = Depends(get_db)) -> schemas.ServiceRead:
    service = ServiceCatalogService.get_service(db, service_id)
    if service is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    return service


@router.post("/", response_model=schemas.ServiceRead, status_code=status.HTTP_201_CREATED)
def create_service(
    service_in: schemas.ServiceCreate,
    db: Session = Depends(get_db),
) -> schemas.ServiceRead:
    return ServiceCatalogService.create_service(db, service_in)


@router.put("/{service_id}", response_model=schemas.ServiceRead)
@router.patch("/{service_id}", response_model=schemas.ServiceRead)
def update_service(
    service_id: str,
    service_in: schemas.ServiceUpdate,
    db: Session = Depends(get_db),
) -> schemas.ServiceRead:
    service = ServiceCatalogService.get_service(db, service_id)
    if service is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    try:
        return ServiceCatalogService.update_service(db, service, service_in)
    except RecordValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_service(service_id: str, db: Session = Depends(get_db)) -> None:
    service = ServiceCatalogService.get_service(db, service_id)
    if service is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    ServiceCatalogService.delete_service(db, service)
