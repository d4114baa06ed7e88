"""Business logic related to client resources."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.orm import Session

from .. import models, schemas
from ..reporting import ClientRecord, summarize_clients
from .common import apply_updates, search_filter

LOGGER = logging.getLogger(__name__)


class ClientService:
    """Encapsulates CRUD operations for clients."""

    @staticmethod
    def list_clients(
        db: Session,
        *,
        search: Optional[str] = None,
        status: Optional[models.ClientStatus] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> Tuple[Iterable[models.Client], int]:
        query = db.query(models.Client)

        if status is not None:
            query = query.filter(models.Client.status == status)
        if search and search.strip():
            # Phone numbers are matched verbatim, names and emails ignore case.
            query = query.filter(
                or_(
                    search_filter(search, models.Client.name, models.Client.email),
                    models.Client.phone.like(f"%{search.strip()}%"),
                )
            )

        total = query.count()
        items = (
            query.order_by(models.Client.name.asc())
            .offset(max(skip, 0))
            .limit(max(limit, 1))
            .all()
        )
        return items, total

    @staticmethod
    def get_client(db: Session, client_id: str) -> Optional[models.Client]:
        return db.query(models.Client).filter(models.Client.id == client_id).first()

    @staticmethod
    def create_client(db: Session, data: schemas.ClientCreate) -> models.Client:
        client = models.Client(**data.model_dump(), status=models.ClientStatus.ACTIVE)
        db.add(client)
        db.commit()
        db.refresh(client)
        LOGGER.info("Created client %s", client.id)
        return client

    @staticmethod
    def update_client(
        db: Session, client: models.Client, data: schemas.ClientUpdate
    ) -> models.Client:
        apply_updates(client, data.model_dump(exclude_unset=True), nullable={"notes"})
        db.add(client)
        db.commit()
        db.refresh(client)
        return client

    @staticmethod
    def delete_client(db: Session, client: models.Client) -> None:
        client_id = client.id
        db.delete(client)
        db.commit()
        LOGGER.info("Deleted client %s", client_id)

    @staticmethod
    def stats(db: Session) -> dict:
        rows = db.query(models.Client.status).all()
        return summarize_clients(ClientRecord.from_row(row) for row in rows)
