"""Router for receipts."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from .. import schemas
from ..database import get_db
from ..models import PaymentMethod, ReceiptStatus
from ..security import require_user
from ..services import ReceiptService, RecordValidationError

router = APIRouter(dependencies=[Depends(require_user)])


@router.get("/", response_model=schemas.ReceiptListResponse)
def list_receipts(
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    client_id: Optional[str] = Query(None),
    employee_id: Optional[str] = Query(None),
    status: Optional[ReceiptStatus] = Query(None),
    payment_method: Optional[PaymentMethod] = Query(None),
    db: Session = Depends(get_db),
) -> schemas.ReceiptListResponse:
    """Return receipts ordered by due date with their client, employee and quote."""
    items, total = ReceiptService.list_receipts(
        db,
        skip=skip,
        limit=limit,
        client_id=client_id,
        employee_id=employee_id,
        status=status,
        payment_method=payment_method,
    )
    return schemas.ReceiptListResponse(items=items, total=total, limit=limit, skip=skip)


@router.get("/stats", response_model=schemas.ReceiptStats)
def receipt_stats(db: Session = Depends(get_db)) -> schemas.ReceiptStats:
    return schemas.ReceiptStats(**ReceiptService.stats(db))


@router.get("/{receipt_id}", response_model=schemas.ReceiptRead)
def get_receipt(receipt_id: str, db: Session = Depends(get_db)) -> schemas.ReceiptRead:
    receipt = ReceiptService.get_receipt(db, receipt_id)
    if receipt is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Receipt not found")
    return receipt


@router.post("/", response_model=schemas.ReceiptRead, status_code=status.HTTP_201_CREATED)
def create_receipt(
    receipt_in: schemas.ReceiptCreate,
    db: Session = Depends(get_db),
) -> schemas.ReceiptRead:
    try:
        return ReceiptService.create_receipt(db, receipt_in)
    except RecordValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.put("/{receipt_id}", response_model=schemas.ReceiptRead)
@router.patch("/{receipt_id}", response_model=schemas.ReceiptRead)
def update_receipt(
    receipt_id: str,
    receipt_in: schemas.ReceiptUpdate,
    db: Session = Depends(get_db),
) -> schemas.ReceiptRead:
    """Update a receipt; marking it paid stamps ``paid_at`` when none is given."""
    receipt = ReceiptService.get_receipt(db, receipt_id)
    if receipt is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Receipt not found")
    try:
        return ReceiptService.update_receipt(db, receipt, receipt_in)
    except RecordValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.delete("/{receipt_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_receipt(receipt_id: str, db: Session = Depends(get_db)) -> None:
    receipt = ReceiptService.get_receipt(db, receipt_id)
    if receipt is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Receipt not found")
    ReceiptService.delete_receipt(db, receipt)
