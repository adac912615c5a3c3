from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field


class ReportPeriod(BaseModel):
    start_date: date
    end_date: date


class AccountSummary(BaseModel):
    account: str
    amount: int = 0


class BalanceSheet(BaseModel):
    assets: list[AccountSummary] = Field(default_factory=list)
    liabilities: list[AccountSummary] = Field(default_factory=list)
    equity: list[AccountSummary] = Field(default_factory=list)
    total_assets: int = 0
    total_liabilities: int = 0
    total_equity: int = 0


class IncomeStatement(BaseModel):
    revenues: list[AccountSummary] = Field(default_factory=list)
    expenses: list[AccountSummary] = Field(default_factory=list)
    total_revenue: int = 0
    total_expense: int = 0
    net_income: int = 0


class FinancialStatements(BaseModel):
    report_type: str = "financial_statements"
    period: ReportPeriod
    balance_sheet: BalanceSheet
    income_statement: IncomeStatement


class PeriodSnapshot(BaseModel):
    """Scalar totals of one statement, flattened for period-over-period comparison."""

    total_revenue: int = 0
    total_expense: int = 0
    net_income: int = 0
    total_assets: int = 0
    total_liabilities: int = 0
    equity: int = 0


class GrowthRates(BaseModel):
    revenue_growth: float = 0.0
    expense_growth: float = 0.0
    net_income_growth: float = 0.0
    asset_growth: float = 0.0


class FinancialRatios(BaseModel):
    profit_margin: float = 0.0
    return_on_assets: float = 0.0
    debt_to_equity: float = 0.0


class FinancialMetrics(BaseModel):
    report_type: str = "financial_metrics"
    current_period: PeriodSnapshot
    previous_period: PeriodSnapshot | None = None
    growth: GrowthRates | None = None
    ratios: FinancialRatios
