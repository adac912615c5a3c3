from __future__ import annotations

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ledgerbook.api.companies import get_company_or_404
from ledgerbook.core.config import settings
from ledgerbook.db.session import get_db
from ledgerbook.schemas.financial import FinancialMetrics, FinancialStatements
from ledgerbook.services.reporting import FinancialStatementService, SqlTransactionSource
from ledgerbook.services.reporting.common import period_for_keyword

router = APIRouter(prefix="/companies/{company_id}/financials", tags=["financials"])


def get_statement_service(db: Session = Depends(get_db)) -> FinancialStatementService:
    return FinancialStatementService(SqlTransactionSource(db), net_income_label=settings.net_income_label)


def _resolve_bounds(
    from_date: date | None,
    to_date: date | None,
    period: str | None,
) -> tuple[date | None, date | None]:
    if not period:
        return from_date, to_date
    parsed = period_for_keyword(period)
    if parsed is None:
        raise HTTPException(status_code=400, detail=f"Unknown period: {period}")
    return parsed.from_date, parsed.to_date


@router.get("", response_model=FinancialStatements)
def get_financial_statements(
    company_id: UUID,
    from_date: date | None = Query(None, alias="from", description="Defaults to January 1st of the end date's year"),
    to_date: date | None = Query(None, alias="to", description="Defaults to today"),
    period: str | None = Query(None, description="Keyword such as this_month, last_month, this_year"),
    db: Session = Depends(get_db),
    service: FinancialStatementService = Depends(get_statement_service),
) -> FinancialStatements:
    get_company_or_404(db, company_id)
    from_date, to_date = _resolve_bounds(from_date, to_date, period)
    return service.statements(company_id, from_date, to_date)


@router.get("/metrics", response_model=FinancialMetrics, response_model_exclude_none=True)
def get_financial_metrics(
    company_id: UUID,
    from_date: date | None = Query(None, alias="from"),
    to_date: date | None = Query(None, alias="to"),
    period: str | None = Query(None, description="Keyword such as this_month, last_month, this_year"),
    compare_from: date | None = Query(None, description="Start of the comparison period; requires compare_to"),
    compare_to: date | None = Query(None, description="End of the comparison period; requires compare_from"),
    compare_previous: bool = Query(False, description="Compare with the equally long window before the period"),
    db: Session = Depends(get_db),
    service: FinancialStatementService = Depends(get_statement_service),
) -> FinancialMetrics:
    get_company_or_404(db, company_id)
    if (compare_from is None) != (compare_to is None):
        raise HTTPException(status_code=400, detail="compare_from and compare_to must be given together")
    from_date, to_date = _resolve_bounds(from_date, to_date, period)
    return service.metrics(
        company_id,
        from_date,
        to_date,
        compare_start=compare_from,
        compare_end=compare_to,
        compare_previous=compare_previous,
    )
