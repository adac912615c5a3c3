from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from ledgerbook.models.transaction import Transaction
from ledgerbook.services.reporting.common import TransactionRecord


class TransactionSource(Protocol):
    """Read-only access to a company's ledger."""

    def fetch_transactions(self, company_id: UUID, start_date: date, end_date: date) -> list[TransactionRecord]:
        """Return the company's transactions dated within [start_date, end_date]."""


def transactions_between(db: Session, company_id: UUID, from_date: date, to_date: date) -> list[Transaction]:
    q = (
        select(Transaction)
        .where(
            Transaction.company_id == company_id,
            Transaction.date >= from_date,
            Transaction.date <= to_date,
        )
        .order_by(Transaction.date, Transaction.created_at, Transaction.id)
    )
    return db.execute(q).scalars().all()


def to_record(t: Transaction) -> TransactionRecord:
    return TransactionRecord(
        id=t.id,
        company_id=t.company_id,
        date=t.date,
        account=t.account,
        amount=int(t.amount or 0),
        type=t.type,
        description=t.description,
    )


class SqlTransactionSource:
    def __init__(self, db: Session):
        self.db = db

    def fetch_transactions(self, company_id: UUID, start_date: date, end_date: date) -> list[TransactionRecord]:
        return [to_record(t) for t in transactions_between(self.db, company_id, start_date, end_date)]
