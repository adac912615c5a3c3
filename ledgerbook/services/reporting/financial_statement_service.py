from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from datetime import date
from typing import Any
from uuid import UUID

from ledgerbook.schemas.financial import (
    AccountSummary,
    BalanceSheet,
    FinancialMetrics,
    FinancialStatements,
    IncomeStatement,
    ReportPeriod,
)
from ledgerbook.services.reporting.common import (
    ASSET,
    EXPENSE,
    INCOME,
    LIABILITY,
    NET_INCOME_LABEL,
    TRANSACTION_TYPES,
    ParsedRange,
    default_period,
    previous_period,
)
from ledgerbook.services.reporting.financial_metrics import compute_metrics
from ledgerbook.services.reporting.repository import TransactionSource

logger = logging.getLogger(__name__)


def group_by_account(transactions: Iterable[Any]) -> dict[tuple[str, str], int]:
    """
    Sum amounts per (account, type).
    Rows with an unknown type, a negative amount or a fractional amount are skipped.
    """
    totals: dict[tuple[str, str], int] = defaultdict(int)
    skipped = 0
    for t in transactions:
        amount = t.amount if t.amount is not None else 0
        if t.type not in TRANSACTION_TYPES or amount < 0 or amount != int(amount):
            skipped += 1
            continue
        totals[(t.account, t.type)] += int(amount)
    if skipped:
        logger.warning("aggregate_skipped_rows count=%s", skipped)
    return dict(totals)


def _summaries(grouped: dict[tuple[str, str], int], txn_type: str) -> list[AccountSummary]:
    rows = [AccountSummary(account=account, amount=amount) for (account, t), amount in grouped.items() if t == txn_type]
    rows.sort(key=lambda x: x.account)
    return rows


def _sum_summaries(items: list[AccountSummary]) -> int:
    return int(sum(s.amount for s in items))


def aggregate(
    transactions: Iterable[Any],
    period: ParsedRange | ReportPeriod,
    *,
    net_income_label: str = NET_INCOME_LABEL,
) -> FinancialStatements:
    """
    Build balance sheet and income statement totals from ledger rows.

    `transactions` must already be limited to one company and to the period;
    `period` is only attached to the result.
    """
    grouped = group_by_account(transactions)

    assets = _summaries(grouped, ASSET)
    liabilities = _summaries(grouped, LIABILITY)
    revenues = _summaries(grouped, INCOME)
    expenses = _summaries(grouped, EXPENSE)

    total_assets = _sum_summaries(assets)
    total_liabilities = _sum_summaries(liabilities)
    total_revenue = _sum_summaries(revenues)
    total_expense = _sum_summaries(expenses)
    net_income = total_revenue - total_expense
    total_equity = total_assets - total_liabilities

    if isinstance(period, ParsedRange):
        report_period = ReportPeriod(start_date=period.from_date, end_date=period.to_date)
    else:
        report_period = period

    return FinancialStatements(
        period=report_period,
        balance_sheet=BalanceSheet(
            assets=assets,
            liabilities=liabilities,
            equity=[AccountSummary(account=net_income_label, amount=net_income)],
            total_assets=total_assets,
            total_liabilities=total_liabilities,
            total_equity=total_equity,
        ),
        income_statement=IncomeStatement(
            revenues=revenues,
            expenses=expenses,
            total_revenue=total_revenue,
            total_expense=total_expense,
            net_income=net_income,
        ),
    )


class FinancialStatementService:
    def __init__(self, source: TransactionSource, *, net_income_label: str = NET_INCOME_LABEL):
        self.source = source
        self.net_income_label = net_income_label

    def statements_for(self, company_id: UUID, period: ParsedRange) -> FinancialStatements:
        rows = self.source.fetch_transactions(company_id, period.from_date, period.to_date)
        statements = aggregate(rows, period, net_income_label=self.net_income_label)
        logger.info(
            "statements_computed company=%s from=%s to=%s rows=%s net_income=%s",
            company_id,
            period.from_date,
            period.to_date,
            len(rows),
            statements.income_statement.net_income,
        )
        return statements

    def statements(
        self,
        company_id: UUID,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> FinancialStatements:
        return self.statements_for(company_id, default_period(start_date, end_date))

    def metrics(
        self,
        company_id: UUID,
        start_date: date | None = None,
        end_date: date | None = None,
        *,
        compare_start: date | None = None,
        compare_end: date | None = None,
        compare_previous: bool = False,
    ) -> FinancialMetrics:
        """
        Metrics for the period, compared against either the explicit
        compare_start/compare_end window or, with compare_previous, the
        equally long window right before the period.
        """
        if (compare_start is None) != (compare_end is None):
            raise ValueError("compare_start and compare_end must be given together")

        period = default_period(start_date, end_date)
        current = self.statements_for(company_id, period)

        comparison: ParsedRange | None = None
        if compare_start is not None and compare_end is not None:
            comparison = default_period(compare_start, compare_end)
        elif compare_previous:
            comparison = previous_period(period)

        previous = self.statements_for(company_id, comparison) if comparison else None
        return compute_metrics(current, previous)
