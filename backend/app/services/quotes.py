"""Business logic for quotes and the services they bundle."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from sqlalchemy.orm import Session, selectinload

from .. import models, schemas
from ..reporting import QuoteRecord, summarize_quotes
from .common import RecordValidationError, apply_updates, ensure_exists

LOGGER = logging.getLogger(__name__)


def _resolve_services(db: Session, service_ids: Sequence[str]) -> List[models.Service]:
    unique_ids = list(dict.fromkeys(str(service_id) for service_id in service_ids))
    if not unique_ids:
        return []
    services = db.query(models.Service).filter(models.Service.id.in_(unique_ids)).all()
    found = {service.id for service in services}
    missing = [service_id for service_id in unique_ids if service_id not in found]
    if missing:
        raise RecordValidationError(f"Unknown services: {', '.join(missing)}")
    return services


class QuoteService:
    """CRUD operations for quotes."""

    @staticmethod
    def _base_query(db: Session):
        return db.query(models.Quote).options(
            selectinload(models.Quote.client),
            selectinload(models.Quote.employee),
            selectinload(models.Quote.services),
        )

    @staticmethod
    def list_quotes(
        db: Session,
        *,
        client_id: Optional[str] = None,
        employee_id: Optional[str] = None,
        status: Optional[models.QuoteStatus] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> Tuple[Iterable[models.Quote], int]:
        query = QuoteService._base_query(db)

        if client_id:
            query = query.filter(models.Quote.client_id == client_id)
        if employee_id:
            query = query.filter(models.Quote.employee_id == employee_id)
        if status is not None:
            query = query.filter(models.Quote.status == status)

        total = query.count()
        items = (
            query.order_by(models.Quote.created_at.desc())
            .offset(max(skip, 0))
            .limit(max(limit, 1))
            .all()
        )
        return items, total

    @staticmethod
    def get_quote(db: Session, quote_id: str) -> Optional[models.Quote]:
        return QuoteService._base_query(db).filter(models.Quote.id == quote_id).first()

    @staticmethod
    def create_quote(db: Session, data: schemas.QuoteCreate) -> models.Quote:
        payload = data.model_dump()
        service_ids = payload.pop("service_ids")

        ensure_exists(db, models.Client, payload["client_id"], "Client")
        ensure_exists(db, models.Employee, payload["employee_id"], "Employee")
        services = _resolve_services(db, service_ids)

        quote = models.Quote(**payload, status=models.QuoteStatus.PENDING)
        quote.services = services
        db.add(quote)
        db.commit()
        db.refresh(quote)
        LOGGER.info("Created quote %s for client %s", quote.id, quote.client_id)
        return quote

    @staticmethod
    def update_quote(
        db: Session, quote: models.Quote, data: schemas.QuoteUpdate
    ) -> models.Quote:
        update_data = data.model_dump(exclude_unset=True)

        if update_data.get("client_id") is not None:
            ensure_exists(db, models.Client, update_data["client_id"], "Client")
        if update_data.get("employee_id") is not None:
            ensure_exists(db, models.Employee, update_data["employee_id"], "Employee")
        if "service_ids" in update_data:
            service_ids = update_data.pop("service_ids")
            if service_ids is None:
                raise RecordValidationError("service_ids cannot be null")
            quote.services = _resolve_services(db, service_ids)

        apply_updates(quote, update_data, nullable={"notes"})
        db.add(quote)
        db.commit()
        db.refresh(quote)
        return quote

    @staticmethod
    def delete_quote(db: Session, quote: models.Quote) -> None:
        quote_id = quote.id
        db.delete(quote)
        db.commit()
        LOGGER.info("Deleted quote %s", quote_id)

    @staticmethod
    def stats(db: Session) -> dict:
        rows = db.query(models.Quote.status, models.Quote.total_amount).all()
        return summarize_quotes(QuoteRecord.from_row(row) for row in rows)
