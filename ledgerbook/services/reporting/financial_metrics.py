from __future__ import annotations

from ledgerbook.schemas.financial import (
    FinancialMetrics,
    FinancialRatios,
    FinancialStatements,
    GrowthRates,
    PeriodSnapshot,
)


def snapshot(statements: FinancialStatements) -> PeriodSnapshot:
    return PeriodSnapshot(
        total_revenue=statements.income_statement.total_revenue,
        total_expense=statements.income_statement.total_expense,
        net_income=statements.income_statement.net_income,
        total_assets=statements.balance_sheet.total_assets,
        total_liabilities=statements.balance_sheet.total_liabilities,
        equity=statements.balance_sheet.total_equity,
    )


def safe_ratio(numerator: int | float, denominator: int | float, *, scale: float = 1.0) -> float:
    """numerator / denominator * scale, or 0.0 when the denominator is zero."""
    if not denominator:
        return 0.0
    return numerator / denominator * scale


def growth_pct(current: int | float, previous: int | float) -> float:
    return safe_ratio(current - previous, previous, scale=100.0)


def compute_ratios(cur: PeriodSnapshot) -> FinancialRatios:
    return FinancialRatios(
        profit_margin=safe_ratio(cur.net_income, cur.total_revenue, scale=100.0),
        return_on_assets=safe_ratio(cur.net_income, cur.total_assets, scale=100.0),
        debt_to_equity=safe_ratio(cur.total_liabilities, cur.equity),
    )


def compute_metrics(
    current: FinancialStatements,
    previous: FinancialStatements | None = None,
) -> FinancialMetrics:
    cur = snapshot(current)
    ratios = compute_ratios(cur)
    if previous is None:
        return FinancialMetrics(current_period=cur, ratios=ratios)

    prev = snapshot(previous)
    growth = GrowthRates(
        revenue_growth=growth_pct(cur.total_revenue, prev.total_revenue),
        expense_growth=growth_pct(cur.total_expense, prev.total_expense),
        net_income_growth=growth_pct(cur.net_income, prev.net_income),
        asset_growth=growth_pct(cur.total_assets, prev.total_assets),
    )
    return FinancialMetrics(
        current_period=cur,
        previous_period=prev,
        growth=growth,
        ratios=ratios,
    )
