"""Business logic for the catalog of services offered to clients."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

from sqlalchemy.orm import Session

from .. import models, schemas
from ..reporting import ServiceRecord, summarize_services
from .common import apply_updates, search_filter

LOGGER = logging.getLogger(__name__)


class ServiceCatalogService:
    """CRUD operations for catalog services."""

    @staticmethod
    def list_services(
        db: Session,
        *,
        search: Optional[str] = None,
        category: Optional[str] = None,
        status: Optional[models.ServiceStatus] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> Tuple[Iterable[models.Service], int]:
        query = db.query(models.Service)

        if category:
            query = query.filter(models.Service.category == category)
        if status is not None:
            query = query.filter(models.Service.status == status)
        if search and search.strip():
            query = query.filter(
                search_filter(
                    search,
                    models.Service.name,
                    models.Service.description,
                    models.Service.category,
                )
            )

        total = query.count()
        items = (
            query.order_by(models.Service.name.asc())
            .offset(max(skip, 0))
            .limit(max(limit, 1))
            .all()
        )
        return items, total

    @staticmethod
    def get_service(db: Session, service_id: str) -> Optional[models.Service]:
        return db.query(models.Service).filter(models.Service.id == service_id).first()

    @staticmethod
    def create_service(db: Session, data: schemas.ServiceCreate) -> models.Service:
        service = models.Service(**data.model_dump(), status=models.ServiceStatus.ACTIVE)
        db.add(service)
        db.commit()
        db.refresh(service)
        LOGGER.info("Created service %s in category %s", service.id, service.category)
        return service

    @staticmethod
    def update_service(
        db: Session, service: models.Service, data: schemas.ServiceUpdate
    ) -> models.Service:
        apply_updates(service, data.model_dump(exclude_unset=True), nullable={"materials"})
        db.add(service)
        db.commit()
        db.refresh(service)
        return service

    @staticmethod
    def delete_service(db: Session, service: models.Service) -> None:
        service_id = service.id
        db.delete(service)
        db.commit()
        LOGGER.info("Deleted service %s", service_id)

    @staticmethod
    def stats(db: Session) -> dict:
        rows = db.query(
            models.Service.status, models.Service.category, models.Service.price
        ).all()
        return summarize_services(ServiceRecord.from_row(row) for row in rows)
