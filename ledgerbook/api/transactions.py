from __future__ import annotations

import logging
from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.orm import Session

from ledgerbook.api.companies import get_company_or_404
from ledgerbook.db.session import get_db
from ledgerbook.models.transaction import Transaction
from ledgerbook.schemas.transaction import TransactionCreate, TransactionRead, TransactionType, TransactionUpdate

router = APIRouter(prefix="/companies/{company_id}/transactions", tags=["transactions"])
logger = logging.getLogger(__name__)


def _get_transaction_or_404(db: Session, company_id: UUID, transaction_id: UUID) -> Transaction:
    t = db.get(Transaction, transaction_id)
    if not t or t.company_id != company_id:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return t


@router.get("", response_model=list[TransactionRead])
def list_transactions(
    company_id: UUID,
    db: Session = Depends(get_db),
    type: TransactionType | None = Query(None, description="income | expense | asset | liability"),
    from_date: date | None = Query(None, alias="from"),
    to_date: date | None = Query(None, alias="to"),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
) -> list[TransactionRead]:
    get_company_or_404(db, company_id)
    q = select(Transaction).where(Transaction.company_id == company_id)
    if type:
        q = q.where(Transaction.type == type)
    if from_date:
        q = q.where(Transaction.date >= from_date)
    if to_date:
        q = q.where(Transaction.date <= to_date)
    q = q.order_by(Transaction.date.desc(), Transaction.created_at.desc()).offset(skip).limit(limit)
    rows = db.execute(q).scalars().all()
    return [TransactionRead.model_validate(t) for t in rows]


@router.get("/{transaction_id}", response_model=TransactionRead)
def get_transaction(
    company_id: UUID,
    transaction_id: UUID,
    db: Session = Depends(get_db),
) -> TransactionRead:
    return TransactionRead.model_validate(_get_transaction_or_404(db, company_id, transaction_id))


@router.post("", response_model=TransactionRead, status_code=201)
def create_transaction(
    company_id: UUID,
    payload: TransactionCreate,
    db: Session = Depends(get_db),
) -> TransactionRead:
    get_company_or_404(db, company_id)
    transaction = Transaction(
        company_id=company_id,
        date=payload.date,
        account=payload.account,
        description=payload.description,
        amount=payload.amount,
        type=payload.type,
    )
    db.add(transaction)
    db.commit()
    db.refresh(transaction)
    logger.info("transaction_created id=%s company=%s type=%s", transaction.id, company_id, transaction.type)
    return TransactionRead.model_validate(transaction)


@router.patch("/{transaction_id}", response_model=TransactionRead)
def update_transaction(
    company_id: UUID,
    transaction_id: UUID,
    payload: TransactionUpdate,
    db: Session = Depends(get_db),
) -> TransactionRead:
    t = _get_transaction_or_404(db, company_id, transaction_id)
    changes = payload.model_dump(exclude_unset=True)
    for field, value in changes.items():
        # description is the only nullable column
        if value is None and field != "description":
            continue
        setattr(t, field, value)
    db.commit()
    db.refresh(t)
    return TransactionRead.model_validate(t)


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(
    company_id: UUID,
    transaction_id: UUID,
    db: Session = Depends(get_db),
) -> None:
    t = _get_transaction_or_404(db, company_id, transaction_id)
    db.delete(t)
    db.commit()
