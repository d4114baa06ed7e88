"""Business logic for receipts and their settlement."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional, Tuple

from sqlalchemy.orm import Session, selectinload

from .. import models, schemas
from ..reporting import ReceiptRecord, summarize_receipts
from .common import RecordValidationError, apply_updates, ensure_exists

LOGGER = logging.getLogger(__name__)


# Every UTC offset is under a day, so this range has a wall time in any zone.
_EARLIEST_PAID_AT = datetime.min.replace(tzinfo=timezone.utc) + timedelta(days=1)
_LATEST_PAID_AT = datetime.max.replace(tzinfo=timezone.utc) - timedelta(days=1)


def _as_utc(moment: datetime) -> datetime:
    # Stored timestamps are UTC; naive input is taken to be UTC already.
    try:
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        else:
            moment = moment.astimezone(timezone.utc)
    except OverflowError as exc:
        raise RecordValidationError("paid_at is out of range") from exc
    if not _EARLIEST_PAID_AT <= moment <= _LATEST_PAID_AT:
        raise RecordValidationError("paid_at is out of range")
    return moment


class ReceiptService:
    """CRUD operations for receipts."""

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    @staticmethod
    def _base_query(db: Session):
        return db.query(models.Receipt).options(
            selectinload(models.Receipt.client),
            selectinload(models.Receipt.employee),
            selectinload(models.Receipt.quote),
        )

    @staticmethod
    def list_receipts(
        db: Session,
        *,
        client_id: Optional[str] = None,
        employee_id: Optional[str] = None,
        status: Optional[models.ReceiptStatus] = None,
        payment_method: Optional[models.PaymentMethod] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> Tuple[Iterable[models.Receipt], int]:
        query = ReceiptService._base_query(db)

        if client_id:
            query = query.filter(models.Receipt.client_id == client_id)
        if employee_id:
            query = query.filter(models.Receipt.employee_id == employee_id)
        if status is not None:
            query = query.filter(models.Receipt.status == status)
        if payment_method is not None:
            query = query.filter(models.Receipt.payment_method == payment_method)

        total = query.count()
        items = (
            query.order_by(models.Receipt.due_date.desc(), models.Receipt.created_at.desc())
            .offset(max(skip, 0))
            .limit(max(limit, 1))
            .all()
        )
        return items, total

    @staticmethod
    def get_receipt(db: Session, receipt_id: str) -> Optional[models.Receipt]:
        return ReceiptService._base_query(db).filter(models.Receipt.id == receipt_id).first()

    @staticmethod
    def create_receipt(db: Session, data: schemas.ReceiptCreate) -> models.Receipt:
        payload = data.model_dump()

        ensure_exists(db, models.Client, payload["client_id"], "Client")
        ensure_exists(db, models.Employee, payload["employee_id"], "Employee")
        if payload.get("quote_id"):
            ensure_exists(db, models.Quote, payload["quote_id"], "Quote")

        receipt = models.Receipt(
            **payload,
            status=models.ReceiptStatus.PENDING,
            paid_at=None,
        )
        db.add(receipt)
        db.commit()
        db.refresh(receipt)
        LOGGER.info("Issued receipt %s for client %s", receipt.id, receipt.client_id)
        return receipt

    @staticmethod
    def update_receipt(
        db: Session, receipt: models.Receipt, data: schemas.ReceiptUpdate
    ) -> models.Receipt:
        update_data = data.model_dump(exclude_unset=True)

        if update_data.get("client_id") is not None:
            ensure_exists(db, models.Client, update_data["client_id"], "Client")
        if update_data.get("employee_id") is not None:
            ensure_exists(db, models.Employee, update_data["employee_id"], "Employee")
        if update_data.get("quote_id"):
            ensure_exists(db, models.Quote, update_data["quote_id"], "Quote")

        status = update_data.get("status") or receipt.status
        explicit_paid_at = "paid_at" in update_data
        paid_at = update_data.get("paid_at") if explicit_paid_at else receipt.paid_at

        # paid_at is set exactly when the receipt is paid.
        if status == models.ReceiptStatus.PAID:
            paid_at = _as_utc(paid_at) if paid_at is not None else ReceiptService._now()
        elif paid_at is not None:
            if explicit_paid_at:
                raise RecordValidationError("paid_at can only be set on paid receipts")
            paid_at = None
        update_data["paid_at"] = paid_at

        previous_status = receipt.status
        apply_updates(receipt, update_data, nullable={"quote_id", "notes", "paid_at"})
        db.add(receipt)
        db.commit()
        db.refresh(receipt)
        if previous_status != receipt.status:
            LOGGER.info(
                "Receipt %s moved from %s to %s",
                receipt.id,
                getattr(previous_status, "value", previous_status),
                receipt.status.value,
            )
        return receipt

    @staticmethod
    def delete_receipt(db: Session, receipt: models.Receipt) -> None:
        receipt_id = receipt.id
        db.delete(receipt)
        db.commit()
        LOGGER.info("Deleted receipt %s", receipt_id)

    @staticmethod
    def stats(db: Session) -> dict:
        rows = db.query(
            models.Receipt.status,
            models.Receipt.amount,
            models.Receipt.payment_method,
            models.Receipt.paid_at,
        ).all()
        return summarize_receipts(ReceiptRecord.from_row(row) for row in rows)
