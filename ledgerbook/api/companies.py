from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.orm import Session

from ledgerbook.db.session import get_db
from ledgerbook.models.company import Company
from ledgerbook.schemas.company import CompanyCreate, CompanyRead, CompanyUpdate

router = APIRouter(prefix="/companies", tags=["companies"])
logger = logging.getLogger(__name__)


def get_company_or_404(db: Session, company_id: UUID) -> Company:
    company = db.get(Company, company_id)
    if not company:
        raise HTTPException(status_code=404, detail="Company not found")
    return company


@router.get("", response_model=list[CompanyRead])
def list_companies(
    search: str | None = Query(None, description="Filter by name (substring, case-insensitive)"),
    db: Session = Depends(get_db),
) -> list[CompanyRead]:
    q = select(Company).order_by(Company.created_at.desc(), Company.name)
    if search and search.strip():
        q = q.where(Company.name.ilike(f"%{search.strip()}%"))
    companies = db.execute(q).scalars().all()
    return [CompanyRead.model_validate(c) for c in companies]


@router.post("", response_model=CompanyRead, status_code=201)
def create_company(
    payload: CompanyCreate,
    db: Session = Depends(get_db),
) -> CompanyRead:
    company = Company(**payload.model_dump())
    db.add(company)
    db.commit()
    db.refresh(company)
    logger.info("company_created id=%s", company.id)
    return CompanyRead.model_validate(company)


@router.get("/{company_id}", response_model=CompanyRead)
def get_company(
    company_id: UUID,
    db: Session = Depends(get_db),
) -> CompanyRead:
    return CompanyRead.model_validate(get_company_or_404(db, company_id))


@router.patch("/{company_id}", response_model=CompanyRead)
def update_company(
    company_id: UUID,
    payload: CompanyUpdate,
    db: Session = Depends(get_db),
) -> CompanyRead:
    company = get_company_or_404(db, company_id)
    changes = payload.model_dump(exclude_unset=True)
    if "name" in changes and changes["name"] is None:
        del changes["name"]
    for field, value in changes.items():
        setattr(company, field, value)
    db.commit()
    db.refresh(company)
    return CompanyRead.model_validate(company)


@router.delete("/{company_id}", status_code=204)
def delete_company(
    company_id: UUID,
    db: Session = Depends(get_db),
) -> None:
    company = get_company_or_404(db, company_id)
    db.delete(company)
    db.commit()
    logger.info("company_deleted id=%s", company_id)
