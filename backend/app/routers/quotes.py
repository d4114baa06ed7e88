"""Router for quotes."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from .. import schemas
from ..database import get_db
from ..models import QuoteStatus
from ..security import require_user
from ..services import QuoteService, RecordValidationError

router = APIRouter(dependencies=[Depends(require_user)])


@router.get("/", response_model=schemas.QuoteListResponse)
def list_quotes(
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    client_id: Optional[str] = Query(None),
    employee_id: Optional[str] = Query(None),
    status: Optional[QuoteStatus] = Query(None),
    db: Session = Depends(get_db),
) -> schemas.QuoteListResponse:
    """Return quotes, newest first, with their client, employee and services."""
    items, total = QuoteService.list_quotes(
        db,
        skip=skip,
        limit=limit,
        client_id=client_id,
        employee_id=employee_id,
        status=status,
    )
    return schemas.QuoteListResponse(items=items, total=total, limit=limit, skip=skip)


@router.get("/stats", response_model=schemas.QuoteStats)
def quote_stats(db: Session = Depends(get_db)) -> schemas.QuoteStats:
    return schemas.QuoteStats(**QuoteService.stats(db))


@router.get("/{quote_id}", response_model=schemas.QuoteRead)
def get_quote(quote_id: str, db: Session = Depends(get_db)) -> schemas.QuoteRead:
    quote = QuoteService.get_quote(db, quote_id)
    if quote is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Quote not found")
    return quote


@router.post("/", response_model=schemas.QuoteRead, status_code=status.HTTP_201_CREATED)
def create_quote(
    quote_in: schemas.QuoteCreate,
    db: Session = Depends(get_db),
) -> schemas.QuoteRead:
    try:
        return QuoteService.create_quote(db, quote_in)
    except RecordValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.put("/{quote_id}", response_model=schemas.QuoteRead)
@router.patch("/{quote_id}", response_model=schemas.QuoteRead)
def update_quote(
    quote_id: str,
    quote_in: schemas.QuoteUpdate,
    db: Session = Depends(get_db),
) -> schemas.QuoteRead:
    quote = QuoteService.get_quote(db, quote_id)
    if quote is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Quote not found")
    try:
        return QuoteService.update_quote(db, quote, quote_in)
    except RecordValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.delete("/{quote_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_quote(quote_id: str, db: Session = Depends(get_db)) -> None:
    quote = QuoteService.get_quote(db, quote_id)
    if quote is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Quote not found")
    QuoteService.delete_quote(db, quote)
